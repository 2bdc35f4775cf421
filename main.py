"""
Backend Entry Point
Run with: uv run python main.py
Or: uv run uvicorn app.main:app --reload
"""
import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.is_development)
