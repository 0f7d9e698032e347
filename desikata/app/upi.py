# desikata/app/upi.py

import json

from desikata.analysis.upi_log import analyze_upi_transactions
from desikata.app.inputs import read_json
from desikata.report.printer import print_upi_analysis


def run(args) -> int:
    transactions = read_json(args.path)
    result = analyze_upi_transactions(transactions)

    if result is None:
        print("✗ No valid transaction data.")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_upi_analysis(result)

    return 0
