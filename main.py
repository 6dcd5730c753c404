import asyncio
import logging
import sys

from roolink import ApiClient, ConfigError, RooLinkError, Settings

# logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


async def report_quota(client: ApiClient) -> None:
    limit = await client.request_limit()
    logging.info(f"Requests remaining: {limit['requests']}")


def main() -> int:
    # Validate required environment variables
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.error(f"Error: {e}")
        logging.error("Please set ROOLINK_API_KEY in your .env file or environment.")
        return 1

    logging.info(f"Client configured for {settings.protected_url or '<no protected url>'}")
    with ApiClient.from_settings(settings) as client:
        try:
            asyncio.run(report_quota(client))
        except RooLinkError as e:
            logging.error(f"Quota check failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
