"""
AniList client configuration.

Values come from the environment, with a local .env file loaded first.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# GraphQL endpoint
ANILIST_API_URL = os.environ.get("ANILIST_API_URL", "https://graphql.anilist.co")

# OAuth access token; anonymous requests when empty
ANILIST_ACCESS_TOKEN = os.environ.get("ANILIST_ACCESS_TOKEN", "")

# Request timeout in seconds
ANILIST_TIMEOUT = float(os.environ.get("ANILIST_TIMEOUT", "10"))
