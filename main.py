import logging
import os
import uvicorn
from dotenv import load_dotenv


# Load environment variables
load_dotenv(dotenv_path=".env")

# Configure logging
log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
log_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
)
logger = logging.getLogger("main")


def main():
    # exit if deepgram api key is not set
    if not os.getenv("DEEPGRAM_API_KEY"):
        logger.error("DEEPGRAM_API_KEY is not set")
        return

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3456"))

    logger.info("Server running on port %d", port)
    logger.info("Visit http://localhost:%d to use the transcriber", port)
    # api is imported by uvicorn after .env is loaded
    uvicorn.run("api:app", host=host, port=port, log_level=logging.getLevelName(log_level).lower())


if __name__ == "__main__":
    main()
