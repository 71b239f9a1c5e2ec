#!/usr/bin/env python3
"""
Demo Web Application - Statement API

A small JSON API over Vault's parsers.

Features:
- Parse INSERT / SELECT statements
- Validate plain comma-separated rows against the table schema
- Show the table schema

Run:
    pip install flask
    python app.py

Then visit: http://localhost:5000/api/schema
"""

import logging
import os

from flask import Flask, jsonify, request

from vault.core.schema import RowParseError, default_schema, validate_row
from vault.parser.parser import StatementPrepareError, parse_statement

app = Flask(__name__)

schema = default_schema()


def _json_field(name):
    """Fetch a string field from the JSON body, or None."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None
    value = payload.get(name)
    if not isinstance(value, str):
        return None
    return value


def _bad_request(message):
    return jsonify({'error': message}), 400


@app.route('/api/schema')
def api_schema():
    """The schema rows are validated against."""
    return jsonify(schema.to_dict())


@app.route('/api/statements', methods=['POST'])
def api_parse_statement():
    """Parse a statement into its JSON form."""
    text = _json_field('statement')
    if text is None:
        return _bad_request("Missing 'statement' string")

    try:
        statement = parse_statement(text)
    except StatementPrepareError as e:
        app.logger.info("Rejected statement: %s", e)
        return _bad_request(str(e))

    return jsonify({'statement': statement.to_dict()})


@app.route('/api/rows', methods=['POST'])
def api_validate_row():
    """Validate a plain comma-separated row."""
    text = _json_field('row')
    if text is None:
        return _bad_request("Missing 'row' string")

    try:
        row = validate_row(text, schema)
    except RowParseError as e:
        app.logger.info("Rejected row: %s", e)
        return _bad_request(str(e))

    return jsonify({'row': [value.to_dict() for value in row]})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    host = os.environ.get('VAULT_HOST', '127.0.0.1')
    port = int(os.environ.get('VAULT_PORT', '5000'))

    print("\n" + "="*60)
    print("Vault Demo - Statement API")
    print("="*60)
    print(f"\nSchema: {schema}")
    print(f"Starting server at http://{host}:{port}")
    print("\nPress Ctrl+C to stop the server.\n")

    app.run(debug=True, host=host, port=port)
