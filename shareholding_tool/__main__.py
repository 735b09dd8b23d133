import argparse
import logging
import os
import sys

import pandas as pd
from dotenv import load_dotenv

from .classification import ShareholdingClassifier
from .governance import (
    board_overview,
    designation_category,
    find_director_holding,
    split_directors,
    summarize_director_holdings,
)
from .registers import load_director_holdings, load_directors, load_shareholders

load_dotenv()


def init_logging():
    logging.basicConfig(
        stream=sys.stdout,
        level=getattr(logging, os.getenv("LOG_LEVEL", "").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


logger = logging.getLogger(__name__)


def parse_args(args):
    parser = argparse.ArgumentParser(
        description="Shareholding pattern and director reconciliation tool"
    )
    parser.add_argument(
        "payload",
        nargs="?",
        help="extracted data JSON holding Directors and Shareholding sections",
    )
    parser.add_argument("--directors", help="directors register (CSV or JSON)")
    parser.add_argument("--shareholders", help="shareholding register (CSV or JSON)")
    parser.add_argument(
        "--director-holdings",
        dest="director_holdings",
        help="director shareholding register (CSV or JSON)",
    )
    parsed = parser.parse_args(args)
    if not parsed.payload and not parsed.shareholders:
        parser.error("either a payload file or --shareholders is required")
    return parsed


def get_registers(args):
    """Return (directors, shareholders, director_holdings) read from the arguments."""
    directors_path = args.directors or args.payload
    shareholders_path = args.shareholders or args.payload
    holdings_path = args.director_holdings or args.payload

    directors = load_directors(directors_path) if directors_path else []
    shareholders = load_shareholders(shareholders_path) if shareholders_path else []
    holdings = load_director_holdings(holdings_path) if holdings_path else []
    return directors, shareholders, holdings


def run(args) -> str:
    directors, shareholders, holdings = get_registers(args)
    pattern = ShareholdingClassifier().classify(directors, shareholders)

    output = []
    if pattern.is_empty:
        output.append("No shareholding above 5% reported")
    else:
        df = pd.DataFrame(
            [
                {
                    "#": row.rank,
                    "Name of Shareholder": row.entity_name,
                    "Relationship": row.relationship,
                    "Shareholding (%)": row.formatted_percent,
                }
                for row in pattern.rows
            ]
        )
        output.append(
            f"Share holding pattern above 5% as on {pattern.latest_period}"
        )
        output.append(df.to_string(index=False))
        output.append(f"Total: {pattern.formatted_total}")

    active, _ = split_directors(directors)
    if active:
        output.append("Active Directors:")
    for director in active:
        line = (
            f"[{designation_category(director.designation)}] {director.name} "
            f"({director.designation or '-'}, "
            f"appointed {director.appointment_date or '-'})"
        )
        holding = find_director_holding(director, holdings) if holdings else None
        if holding:
            line += (
                f": {holding.shareholding_percent:g}% "
                f"({holding.share_count:,} shares)"
            )
        output.append(line)

    if holdings:
        summary = summarize_director_holdings(holdings)
        output.append(
            f"Directors holding shares: {summary.holders_count}, "
            f"total {summary.total_percent:.1f}%, "
            f"largest {summary.max_percent:.1f}%, "
            f"{summary.total_shares:,} shares"
        )

    output.extend(board_overview(directors, shareholders, pattern=pattern))
    return "\n".join(output)


if __name__ == "__main__":
    init_logging()

    args = parse_args(sys.argv[1:])
    logger.debug(args)
    print(run(args))
