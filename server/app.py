"""
binstats Server - symbol size statistics for nm output
"""

from typing import Optional

from flask import Flask, request, jsonify

from binstats import logger
from binstats.demanglers import DemanglerFactory
from binstats.parsers import ReadResult, read_symbols
from binstats.stats import FilterState, aggregate
from binstats.symbols import SymbolType

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 64 * 1024 * 1024  # 64MB of nm output

# Snapshot of the last successful read. Replaced as a whole, never modified.
current_read: Optional[ReadResult] = None


def _request_output() -> str:
    """nm output from the request body, either plain text or JSON {'output': ...}"""
    if request.is_json:
        data = request.get_json(silent=True) or {}
        output = data.get('output')
        if not isinstance(output, str):
            raise ValueError("output is required")
        return output
    return request.get_data(as_text=True)


@app.route('/api/symbols', methods=['POST'])
def submit_symbols():
    """Read nm output and make it the current symbol table"""
    global current_read

    try:
        output = _request_output()
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    logger.info(f"submit_symbols called with {len(output)} characters")
    read_result = read_symbols(output)

    if read_result.is_empty:
        # keep the previous snapshot, the new output had no symbols
        return jsonify(read_result.to_dict()), 422

    current_read = read_result
    return jsonify(read_result.to_dict())


@app.route('/api/symbols/status')
def get_symbols_status():
    """Get the status of the current symbol table"""
    if current_read is None:
        return jsonify({'status': 'not_loaded', 'message': 'No symbols have been read'}), 404
    return jsonify(current_read.to_dict())


@app.route('/api/stats')
def get_stats():
    """
    Get statistics and symbol rows for the current symbol table.

    Query parameters:
        - pattern: Name filter (wildcards * ? #, or a plain substring)
        - disabled: Comma separated type letters to hide, '?' for unknown
        - local: 0 to hide local symbols
        - global: 0 to hide global symbols
    """
    if current_read is None:
        return jsonify({'error': 'No symbols have been read'}), 404

    try:
        filter_state = FilterState.from_dict(request.args)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    aggregation = aggregate(current_read.table, filter_state)
    response = aggregation.to_dict()
    response['filter'] = filter_state.to_dict()
    return jsonify(response)


@app.route('/api/types')
def get_types():
    """Get descriptions of the nm type letters"""
    return jsonify(SymbolType.all_descriptions())


@app.route('/api/available/demanglers')
def get_available_demanglers():
    """Get list of available demanglers"""
    return jsonify(DemanglerFactory.get_available_demanglers())
