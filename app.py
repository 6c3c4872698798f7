"""Flask static file server for the RoseOS web controller.

Run:
  pip install -e .
  python app.py

Serves everything under `web/`, with `/` mapped to the WiFi controller and
`/ble` to the legacy BLE controller. Set PORT to change the listening port.
On startup the server prints the local network URLs so a phone on the same
WiFi can open the controller.
"""
from flask import Flask
from pathlib import Path
import os
import sys

import netinfo

WEB_DIR = Path(__file__).parent / 'web'
HOST = '0.0.0.0'
DEFAULT_PORT = 5050

WIFI_PAGE = 'controller_wifi.html'
BLE_PAGE = 'controller.html'

app = Flask(__name__, static_folder=str(WEB_DIR), static_url_path='')


@app.route('/')
def index():
    return app.send_static_file(WIFI_PAGE)


@app.route('/ble')
def ble_controller():
    """Legacy BLE controller page."""
    return app.send_static_file(BLE_PAGE)


def get_port(environ=os.environ) -> int:
    value = environ.get('PORT')
    if not value:
        return DEFAULT_PORT
    return int(value)


def print_banner(port: int, ips, out=None):
    out = out or sys.stdout
    lines = [
        '',
        '========================================',
        '   RoseOS Web Controller Server',
        '========================================',
        '',
        f"Local:    http://localhost:{port}",
    ]
    for url in netinfo.network_urls(port, ips):
        lines.append(f"Network:  {url}")
    lines += [
        '',
        '-> Open the Network URL on your phone!',
        '-> Make sure phone is on same WiFi as this PC',
        '',
        'Press Ctrl+C to stop',
        '',
    ]
    print('\n'.join(lines), file=out)


def main():
    port = get_port()
    print_banner(port, netinfo.get_local_ips())
    # bind errors (port in use, permissions) propagate and end the process
    app.run(host=HOST, port=port)


if __name__ == '__main__':
    main()
