#setup: pip install -e ".[test]"
#setup: flask --app compound_interest.wsgi run --port 5000 --debug

from compound_interest.app import create_app
from compound_interest.config import configure_logging, get_settings

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
app = create_app(settings)


if __name__ == "__main__":
    app.run(port=settings.PORT, debug=settings.DEBUG)
