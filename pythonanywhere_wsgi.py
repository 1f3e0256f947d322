import sys
import os

# Add your project directory to the sys.path
project_home = '/home/YOUR_USERNAME/doughmaster'
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)

# Hosted instances run the production config unless told otherwise
os.environ.setdefault('FLASK_ENV', 'production')

# Import the Flask app and make sure the settings table exists
from app import app as application, init_db

init_db()
