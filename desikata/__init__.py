from desikata.analysis.upi_log import AnalysisResult, analyze_upi_transactions
from desikata.core.report_card import StudentReport, generate_report_card
from desikata.core.titles import fix_title

__all__ = [
    "AnalysisResult",
    "StudentReport",
    "analyze_upi_transactions",
    "fix_title",
    "generate_report_card",
]
