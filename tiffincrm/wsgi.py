# tiffincrm/wsgi.py
from tiffincrm.app import create_app

# For gunicorn / `flask --app tiffincrm.wsgi run`
app = create_app()
