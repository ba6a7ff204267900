from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    TWITTER_API_KEY = os.getenv('TWITTER_API_KEY')
    TWITTER_API_SECRET = os.getenv('TWITTER_API_SECRET')
    TWITTER_ACCESS_TOKEN = os.getenv('TWITTER_ACCESS_TOKEN')
    TWITTER_ACCESS_SECRET = os.getenv('TWITTER_ACCESS_SECRET')

    API_URL = os.getenv('TWITTER_API_URL', 'https://api.twitter.com/1.1/')
    TIMEOUT = float(os.getenv('TWITTER_TIMEOUT', '30'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
