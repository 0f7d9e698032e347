from flask import Flask, jsonify, request

from desikata.analysis.upi_log import analyze_upi_transactions
from desikata.core.report_card import generate_report_card
from desikata.core.titles import fix_title
from desikata.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)

app = Flask(__name__)
# keep categoryBreakdown in first-seen order
app.json.sort_keys = False


def json_body():
    """Parsed JSON body, or None when the body isn't valid JSON."""
    return request.get_json(silent=True)


@app.route("/api/health")
def api_health():
    return jsonify({"ok": True})


@app.route("/api/upi", methods=["POST"])
def api_upi():
    data = json_body()
    if data is None:
        return jsonify({"error": "Request body must be JSON"}), 400

    result = analyze_upi_transactions(data)
    if result is None:
        logger.info("upi analysis rejected: no valid transactions")
        return jsonify({"error": "No valid transaction data"}), 422

    return jsonify(result.to_dict())


@app.route("/api/title", methods=["POST"])
def api_title():
    data = json_body()
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    return jsonify({"title": fix_title(data.get("title"))})


@app.route("/api/report-card", methods=["POST"])
def api_report_card():
    data = json_body()
    if data is None:
        return jsonify({"error": "Request body must be JSON"}), 400

    report = generate_report_card(data)
    if report is None:
        return jsonify({"error": "Invalid student record"}), 422

    return jsonify(report.to_dict())


def main():
    configure_logging()
    app.run(debug=False, port=5000)


if __name__ == "__main__":
    main()
