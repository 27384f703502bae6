import os
from dotenv import load_dotenv

# Values already exported in the environment win over .env
load_dotenv(override=False)

SQLALCHEMY_DATABASE_URL = os.getenv("SQLALCHEMY_DATABASE_URL", "sqlite:///./runai.db")
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")  # Use a strong random string
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# LLM Selection Configuration
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()  # Options: openai, openrouter, ollama
LLM_API_KEY = os.getenv("LLM_API_KEY") or OPENAI_API_KEY
LLM_MODEL = os.getenv("LLM_MODEL")  # Optional override for plan generation
CHAT_MODEL = os.getenv("CHAT_MODEL")  # Optional override for the chat coach
OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434")

LANGFUSE_PUBLIC_KEY = os.getenv("LANGFUSE_PUBLIC_KEY")
LANGFUSE_SECRET_KEY = os.getenv("LANGFUSE_SECRET_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Browser clients call the two coach functions cross-origin
CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]
