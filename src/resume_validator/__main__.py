from resume_validator.cli import app

app()
