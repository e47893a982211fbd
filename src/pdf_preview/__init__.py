"""Package initialization for pdf_preview."""

from pathlib import Path

from dotenv import load_dotenv

# Load .env at package initialization
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

if ENV_FILE_PATH.exists():
    # Don't override existing env vars; variables set by the Lambda runtime or the shell win over
    # values from the .env file, which should not exist in deployed environments.
    load_dotenv(ENV_FILE_PATH, override=False)
