"""Public contact form."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, Regexp

from janatar_bhasha.utils.validators import EMAIL_PATTERN


class ContactForm(FlaskForm):
    name = StringField('নাম', validators=[
        DataRequired(message='Name is required'),
        Length(max=100)
    ])
    email = StringField('ইমেইল', validators=[
        DataRequired(message='Email is required'),
        Regexp(EMAIL_PATTERN, message='Invalid email address'),
        Length(max=120)
    ])
    phone = StringField('ফোন', validators=[
        Optional(),
        Length(max=20)
    ])
    subject = StringField('বিষয়', validators=[
        Optional(),
        Length(max=200)
    ])
    message = TextAreaField('বার্তা', validators=[
        DataRequired(message='Message is required')
    ])
