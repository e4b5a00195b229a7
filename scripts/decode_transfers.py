#!/usr/bin/env python3
"""
CLI wrapper for decoding Ethereum transfers.

Usage:
    python scripts/decode_transfers.py \\
        --input data/raw/transactions.json \\
        --output data/processed/transfers.csv \\
        --config configs/decoder_config.yaml
"""

from erc20_decoder.cli import main

if __name__ == "__main__":
    main()
