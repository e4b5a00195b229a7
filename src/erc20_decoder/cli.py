"""
Command line interface for decoding transfers.

Reads a JSON list of transaction records and writes the decoded transfers
to CSV.

Usage:
    erc20-decode \\
        --input data/raw/transactions.json \\
        --output data/processed/transfers.csv

Settings are read from configs/decoder_config.yaml when --config is given;
command line flags override them.
"""

import json
import logging
import sys
from pathlib import Path

import click

from .config import DecoderConfig
from .core.utils import LOG_LEVELS, setup_logging
from .decoders.transfer import TransferDecoder
from .errors import ERC20Error
from .export import export_to_csv

logger = logging.getLogger(__name__)


def load_transactions(input_path: Path) -> list[dict]:
    """
    Load transaction records from a JSON file.

    The file holds either a list of records or an object with a
    ``transactions`` list.

    Raises:
        ValueError: If the file does not contain a list of records
    """
    with open(input_path, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("transactions")

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of transactions in {input_path}")

    return data


@click.command()
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Input JSON file with raw transaction records",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Output CSV file path for decoded transfers",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to decoder config YAML file",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Logging level (overrides config file)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Abort on the first transaction that fails to decode",
)
@click.option(
    "--transfers-only",
    is_flag=True,
    default=False,
    help="Only export Ether and ERC20 transfers",
)
def main(
    input_path: Path,
    output_path: Path,
    config_path: Path | None,
    log_level: str | None,
    strict: bool | None,
    transfers_only: bool,
) -> None:
    """
    Decode Ethereum transactions into Ether and ERC20 transfers.
    """
    try:
        cfg = DecoderConfig.from_yaml(config_path) if config_path else DecoderConfig()
    except (ValueError, OSError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(level=log_level or cfg.logging.level, log_format=cfg.logging.format)

    if strict is None:
        strict = cfg.decoder.strict
    transfers_only = transfers_only or cfg.decoder.transfers_only

    logger.info("Starting transfer decoding")
    logger.info(f"Input file: {input_path}")
    logger.info(f"Output file: {output_path}")

    try:
        transactions = load_transactions(input_path)
        logger.info(f"Loaded {len(transactions)} transactions")

        decoder = TransferDecoder(annotate_tokens=cfg.decoder.annotate_tokens)
        results = decoder.decode_batch(transactions, skip_errors=not strict)

        if transfers_only:
            results = [result for result in results if result.is_transfer]

        if results:
            export_to_csv(results, output_path)
            logger.info("Decoding completed successfully")
        else:
            logger.warning("No transactions were successfully decoded")

    except (ERC20Error, ValueError, OSError) as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
