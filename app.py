import os
import logging
from datetime import datetime
from uuid import uuid4

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from flask import Flask, request, g
from flask_cors import CORS

from config import Config
from bandtracks.settings import AppSettings, load_app_settings
from bandtracks.clients import ITunesClient
from bandtracks.domain.catalog import TrackSearchService
from bandtracks.domain.favorites import FavoritesRegistry
from bandtracks.interfaces.http.routes import search_bp, favorite_bp, health_bp
from bandtracks.observability import configure_structured_logging, metrics_blueprint
from bandtracks.utils.cache import TTLCache


logger = logging.getLogger(__name__)


def configure_logging(log_dir: str) -> str:
    """
    Configure root logging with:
      - FileHandler (INFO+) to a new file per run: log-YYYY-MM-DD-HH-MM-SS
      - StreamHandler (WARNING+) to console when ENABLE_CONSOLE_LOGS is set
      - Werkzeug/Flask loggers routed to root

    Returns the path to the created log file.
    """
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_path = os.path.join(log_dir, f"log-{timestamp}")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # Preserve structured handlers; remove existing FileHandlers to avoid duplicates
    root.handlers = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if Config.ENABLE_CONSOLE_LOGS:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    for name in ("werkzeug", "flask.app"):
        _l = logging.getLogger(name)
        _l.setLevel(logging.INFO)
        _l.handlers = []
        _l.propagate = True

    return log_path


def create_app(settings: AppSettings = None, search_service: TrackSearchService = None,
               favorites_registry: FavoritesRegistry = None):
    settings = settings or load_app_settings()

    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.update(
        {
            'DEBUG': settings.debug,
            'PORT': settings.port,
            'SEARCH_CACHE_TTL_SECONDS': settings.cache_ttl_seconds,
            'ITUNES_SEARCH_URL': settings.itunes_search_url,
        }
    )
    # Keep the Spanish messages readable in responses
    app.json.ensure_ascii = False
    configure_structured_logging(app)

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get('X-Request-ID') or uuid4().hex

    @app.after_request
    def _inject_request_id(response):
        if getattr(g, 'request_id', None):
            response.headers.setdefault('X-Request-ID', g.request_id)
        return response

    # Public API: any origin may call it
    CORS(app, resources={r"/*": {"origins": "*"}}, send_wildcard=True)

    # Process-lifetime state owned by the app, read by handlers via app.extensions
    if search_service is None:
        search_service = TrackSearchService(
            client=ITunesClient(
                base_url=settings.itunes_search_url,
                timeout=settings.itunes_timeout_seconds,
            ),
            cache=TTLCache(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl_seconds),
            upstream_limit=settings.itunes_search_limit,
        )
    app.extensions['track_search_service'] = search_service
    app.extensions['favorites_registry'] = (
        favorites_registry if favorites_registry is not None else FavoritesRegistry()
    )
    app.logger.info(
        "Search cache ready: ttl=%ss, maxsize=%s, upstream=%s",
        settings.cache_ttl_seconds, settings.cache_maxsize, settings.itunes_search_url,
    )

    # --- Register Blueprints ---
    app.register_blueprint(search_bp)
    app.register_blueprint(favorite_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_blueprint)

    return app


if __name__ == '__main__':
    settings = load_app_settings()

    # In debug with reloader: only log to file in the child process to avoid duplicate files
    if not settings.debug or os.environ.get('WERKZEUG_RUN_MAIN') == 'true':
        log_file_path = configure_logging(Config.LOG_DIR)
        logger.info("File logging initialized at %s", log_file_path)

    app = create_app(settings)
    logger.info("Servidor corriendo en http://localhost:%s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
