from typing import Optional

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()  # Loads environment variables from .env


class Settings(BaseModel):
    CLOUDINARY_CLOUD_NAME: Optional[str] = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY: Optional[str] = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET: Optional[str] = os.getenv("CLOUDINARY_API_SECRET")
    CLOUDINARY_UPLOAD_FOLDER: str = os.getenv("CLOUDINARY_UPLOAD_FOLDER", "social-share-uploads")
    SUPABASE_URL: Optional[str] = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: Optional[str] = os.getenv("SUPABASE_KEY")
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")

settings = Settings()

CLOUDINARY_CLOUD_NAME = settings.CLOUDINARY_CLOUD_NAME
CLOUDINARY_API_KEY = settings.CLOUDINARY_API_KEY
CLOUDINARY_API_SECRET = settings.CLOUDINARY_API_SECRET
CLOUDINARY_UPLOAD_FOLDER = settings.CLOUDINARY_UPLOAD_FOLDER
SUPABASE_URL = settings.SUPABASE_URL
SUPABASE_KEY = settings.SUPABASE_KEY
MAX_UPLOAD_BYTES = settings.MAX_UPLOAD_BYTES
LOG_LEVEL = settings.LOG_LEVEL
