import warnings
from mic_upload.main import create_app

warnings.filterwarnings('ignore')

app = create_app()

if __name__ == "__main__":
    import uvicorn
    from mic_upload.config import get_settings

    settings = get_settings()
    uvicorn.run("main:app", host=settings.api_host, port=settings.api_port, reload=settings.api_reload)
