"""Authentication forms."""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, BooleanField
from wtforms.validators import DataRequired, Regexp

from janatar_bhasha.utils.validators import EMAIL_PATTERN


class LoginForm(FlaskForm):
    """Login form.

    Accepts every address ``create_admin_user`` accepts, including
    internal domains such as ``.local``.
    """
    email = StringField('Email', validators=[
        DataRequired(message='Email is required'),
        Regexp(EMAIL_PATTERN, message='Please enter a valid email address')
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message='Password is required')
    ])
    remember = BooleanField('Remember Me')
