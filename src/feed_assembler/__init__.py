
from dotenv import load_dotenv

# Load environment variables from .env as early as possible so settings
# read from os.environ pick up the configured values.
load_dotenv()
