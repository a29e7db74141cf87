"""CLI adapter refreshing crypto investment prices."""

from src.domain.errors import NotAuthenticatedError
from src.infrastructure.container import build_update_crypto_prices_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the price refresh and print which symbols were updated."""
    logger = get_app_logger()
    use_case = build_update_crypto_prices_use_case()
    try:
        result = use_case.execute()
    except NotAuthenticatedError as exc:
        logger.error(f"Cannot refresh prices: {exc}")
        raise SystemExit(1) from exc

    print(f"Updated {len(result.updated)} symbols.")
    if result.failed:
        print(f"Failed: {', '.join(result.failed)}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} investments without symbol.")


if __name__ == "__main__":  # pragma: no cover
    main()
