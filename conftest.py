"""
Pytest configuration file for proper Unicode/UTF-8 handling

Accented Lithuanian output uses combining marks (U+0300, U+0301, U+0303)
that must survive printing on any console.
"""

import sys
import io
import os

# Force UTF-8 encoding globally
os.environ['PYTHONIOENCODING'] = 'utf-8'

# Configure stdout and stderr for UTF-8
if sys.platform == 'win32':
    # Windows-specific UTF-8 handling
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    elif sys.stdout.encoding != 'utf-8':
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
        sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "phonology_engine: test needs the real phonology_engine package"
    )
