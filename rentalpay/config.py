import os
from dotenv import load_dotenv

load_dotenv()

# Tokens are issued by the main shop API
SECRET_KEY = os.getenv('SECRET_KEY', 'rentalpay_dev_secret_key_change_me')
JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
ACCESS_EXPIRES_MIN = int(os.getenv('ACCESS_EXPIRES_MIN', '30'))

RATE_LIMIT = os.getenv('RATE_LIMIT', '100 per hour')
RATELIMIT_STORAGE_URI = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')

LOG_DIR = os.getenv('LOG_DIR', 'logs')
