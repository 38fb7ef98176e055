"""
WiFi scan routes.

Provides REST endpoints that run a one-shot scan with the platform's
scanning tool and return the access points found.
"""

from __future__ import annotations

import csv
import io
import logging
from datetime import datetime

from flask import Blueprint, Response, jsonify, request

from wifiscanner import (
    CommandNotFound,
    NoValue,
    WiFiAccessPoint,
    WiFiScanError,
    WiFiScanner,
)
from wifiscanner.constants import LINUX_SCAN_TOOLS

logger = logging.getLogger('wifiscanner.routes.wifi')

wifi_bp = Blueprint('wifi', __name__, url_prefix='/api/wifi')

CSV_FIELDS = ['mac', 'ssid', 'channel', 'signal_level', 'security']


def _error_response(error: WiFiScanError) -> tuple[Response, int]:
    """Map a scan failure onto an HTTP error."""
    if isinstance(error, CommandNotFound):
        status_code = 503
    elif isinstance(error, NoValue):
        status_code = 404
    else:
        status_code = 500

    return jsonify({
        'status': 'error',
        'error': error.kind,
        'message': error.message,
    }), status_code


def _networks_csv(networks: list[WiFiAccessPoint]) -> Response:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_FIELDS)
    for network in networks:
        writer.writerow([getattr(network, field) for field in CSV_FIELDS])

    return Response(
        output.getvalue(),
        mimetype='text/csv',
        headers={
            'Content-Disposition': f'attachment; filename=wifi_networks_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
        }
    )


@wifi_bp.route('/scan', methods=['GET'])
def scan_networks():
    """
    Run a WiFi scan.

    Query parameters:
        - tool: Linux scan tool ('iw', 'iwlist'), defaults to configuration
        - format: Response format ('json', 'csv')

    Returns:
        JSON with the networks found, or a CSV download.
    """
    tool = request.args.get('tool')
    export_format = request.args.get('format', 'json').lower()

    if tool and tool not in LINUX_SCAN_TOOLS:
        return jsonify({
            'status': 'error',
            'message': f'Invalid tool. Must be one of: {", ".join(LINUX_SCAN_TOOLS)}'
        }), 400

    try:
        networks = WiFiScanner(linux_tool=tool).scan()
    except WiFiScanError as e:
        logger.error(f"WiFi scan failed: {e.kind}: {e.message}")
        return _error_response(e)

    if export_format == 'csv':
        return _networks_csv(networks)

    return jsonify({
        'status': 'success',
        'count': len(networks),
        'networks': [n.to_dict() for n in networks],
    })


@wifi_bp.route('/interface', methods=['GET'])
def get_interface():
    """
    Get the wireless interface a Linux iw scan would use.

    Returns:
        JSON with the interface name.
    """
    try:
        interface = WiFiScanner().find_interface()
    except WiFiScanError as e:
        logger.error(f"Interface discovery failed: {e.kind}: {e.message}")
        return _error_response(e)

    return jsonify({
        'status': 'success',
        'interface': interface,
    })
