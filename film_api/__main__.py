import logging

from film_api import create_app

app = create_app()

logging.basicConfig(
    level=app.config["LOG_LEVEL"],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    port = app.config["API_PORT"]
    logger.info("starting server on port %s", port)
    app.run(host="0.0.0.0", port=int(port), threaded=True)
