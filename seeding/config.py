import os
from dotenv import load_dotenv
from pymongo import MongoClient

load_dotenv()


def mongodb_uri() -> str:
    uri = os.getenv("MONGODB_URI")
    if not uri:
        raise RuntimeError("Missing MONGODB_URI in .env")
    return uri


def connect() -> MongoClient:
    """Client for MONGODB_URI. The caller owns it and must close it."""
    return MongoClient(mongodb_uri())
