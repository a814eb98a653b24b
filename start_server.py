#!/usr/bin/env python3
"""Start the API with uvicorn, honouring the PORT environment variable."""

import os
import subprocess
import sys

port = os.environ.get("PORT", "8000")

try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
    port_int = 8000

src_path = os.path.abspath("src")
pythonpath = os.environ.get("PYTHONPATH", "")
os.environ["PYTHONPATH"] = f"{src_path}{os.pathsep}{pythonpath}" if pythonpath else src_path

cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    "binvalet.main:app",
    "--host",
    "0.0.0.0",
    "--port",
    str(port_int),
    "--proxy-headers",
    "--forwarded-allow-ips",
    "*",
]

print(f"Starting server on port {port_int}...", file=sys.stderr)
try:
    sys.exit(subprocess.call(cmd))
except KeyboardInterrupt:
    print("Server interrupted by user", file=sys.stderr)
    sys.exit(0)
