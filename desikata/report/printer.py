from desikata import config


def fmt_amount(amount, sign: str = "") -> str:
    return f"{sign}₹{abs(amount):,.2f}"


def fmt_bool(v):
    return "yes" if v else "no"


def print_breakdown(title: str, data: dict):
    print("\n" + title)
    print("-" * len(title))

    total = 0
    for key, val in data.items():
        print(f"{str(key):<15} {fmt_amount(val):>14}")
        total += val

    print("-" * len(title))
    print(f"{'TOTAL':<15} {fmt_amount(total):>14}")


def print_upi_analysis(result):
    print("UPI Transaction Summary")
    print("=======================")
    print(f"Transactions : {result.transaction_count}")
    print(f"Credit       : {fmt_amount(result.total_credit, '+')}")
    print(f"Debit        : {fmt_amount(result.total_debit, '-')}")

    sign = "+" if result.net_balance >= 0 else "-"
    print(f"Net          : {fmt_amount(result.net_balance, sign)}")
    print(f"Average      : {fmt_amount(result.avg_transaction)}")

    top = result.highest_transaction
    print(f"Highest      : {fmt_amount(top.get('amount'))} ({top.get('id') or '-'})")
    print(f"Top contact  : {result.frequent_contact}")
    ceiling = config.get("upi.small_transaction_ceiling", 100)
    large = config.get("upi.large_transaction_threshold", 5000)
    print(f"All > ₹{ceiling:<6}: {fmt_bool(result.all_above_100)}")
    print(f"Any ≥ ₹{large:<6}: {fmt_bool(result.has_large_transaction)}")

    print_breakdown("Summary by Category", result.category_breakdown)


def print_report_card(report):
    title = f"Report Card: {report.name}"
    print(title)
    print("=" * len(title))
    print(f"Subjects   : {report.subject_count}")
    print(f"Total      : {report.total_marks}")
    print(f"Percentage : {report.percentage}%")
    print(f"Grade      : {report.grade}")
    print(f"Highest    : {report.highest_subject}")
    print(f"Lowest     : {report.lowest_subject}")
    print(f"Passed     : {', '.join(report.passed_subjects) or '-'}")
    print(f"Failed     : {', '.join(report.failed_subjects) or '-'}")
