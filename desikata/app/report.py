# desikata/app/report.py

import json

from desikata.app.inputs import read_json
from desikata.core.report_card import generate_report_card
from desikata.report.printer import print_report_card


def run(args) -> int:
    student = read_json(args.path)
    report = generate_report_card(student)

    if report is None:
        print("✗ Invalid student record.")
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_report_card(report)

    return 0
