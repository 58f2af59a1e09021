# app.py
import logging
import os
from datetime import datetime, timezone

from flask import Flask, request, jsonify, send_file, url_for
from werkzeug.utils import secure_filename

from sqllint import Linter, RuleEngine, lint_sql_text
from pdf_generator.reportlab_pdf import generate_pdf

OUTPUT_FOLDER = os.environ.get("SQLLINT_OUTPUT", "output")
CHECKS_PATH = os.environ.get("SQLLINT_CHECKS", "config/checks.json")
ALLOWED_EXT = {'.sql', '.txt'}

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _checks_path():
    path = app.config.get("CHECKS_PATH", CHECKS_PATH)
    return path if path and os.path.exists(path) else None


def _output_folder():
    folder = app.config.get("OUTPUT_FOLDER", OUTPUT_FOLDER)
    os.makedirs(folder, exist_ok=True)
    return folder


def allowed_file(filename):
    ext = os.path.splitext(filename)[1].lower()
    return ext in ALLOWED_EXT


@app.route('/validate', methods=['POST'])
def validate_route():
    if 'sqlFile' not in request.files:
        return jsonify({"error": "No file part 'sqlFile'"}), 400

    file = request.files['sqlFile']
    if file.filename == '':
        return jsonify({"error": "No selected file"}), 400
    if not allowed_file(file.filename):
        return jsonify({"error": "Only .sql or .txt files allowed"}), 400

    content = file.read().decode('utf-8', errors='ignore')
    script_name = secure_filename(file.filename)

    # parse form fields
    name = request.form.get('name', '')
    team = request.form.get('team', '')
    dialect = request.form.get('dialect', 'mysql')

    results, summary = lint_sql_text(
        content,
        checks_path=_checks_path(),
        name=script_name,
        dialect=dialect,
    )

    # <script>_<YYYYMMDD>_<HHMMSS>.pdf
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    stem = os.path.splitext(script_name)[0] or "script"
    out_filename = f"{stem}_{timestamp}.pdf"
    out_path = os.path.join(_output_folder(), out_filename)

    run_meta = {
        "script": script_name,
        "name": name,
        "team": team,
        "generated_at": datetime.now(timezone.utc).isoformat()
    }

    generate_pdf(run_meta, results, summary, out_path)
    logger.info("lint report for %s written to %s", script_name, out_path)

    pdf_url = url_for('download_file', filename=out_filename)

    return jsonify({
        "results": results,
        "summary": summary,
        "pdf_url": pdf_url
    })


@app.route('/lint', methods=['POST'])
def lint_route():
    """Lint the raw request body and return the diagnostics as JSON."""
    content = request.get_data(as_text=True)
    if not content.strip():
        return jsonify({"error": "Empty request body"}), 400

    dialect = request.args.get('dialect', 'mysql')
    linter = Linter(RuleEngine(checks_config_path=_checks_path()), dialect=dialect)
    diagnostics = linter.lint(content, name=request.args.get('name', '<request>'))

    return jsonify({
        "diagnostics": [d.to_dict() for d in diagnostics],
        "count": len(diagnostics),
    })


@app.route('/download/<filename>', methods=['GET'])
def download_file(filename):
    path = os.path.join(_output_folder(), secure_filename(filename))
    if not os.path.exists(path):
        return "Not found", 404
    return send_file(os.path.abspath(path), as_attachment=True)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host='0.0.0.0', port=5000)
