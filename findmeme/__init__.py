"""FindMeme: meme catalog with moderation, tagging, and favorites."""

__version__ = "1.0.0"
