"""E-paper upload form."""

from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired, FileAllowed
from wtforms import DateField
from wtforms.validators import DataRequired


class EpaperUploadForm(FlaskForm):
    pdf = FileField('PDF File', validators=[
        FileRequired(message='Please select a PDF file'),
        FileAllowed(['pdf'], message='Only PDF files are allowed')
    ])
    date = DateField('Publication Date', format='%Y-%m-%d', validators=[
        DataRequired(message='Please pick a publication date')
    ])
