#!/usr/bin/env python3
"""
Simple runner script for the Cleaning Quote Generator
"""

import logging

from cleanquote.app import ENDPOINTS, create_app
from cleanquote.config import get_settings


if __name__ == '__main__':
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("Starting Cleaning Quote Generator...")
    print(f"Server will be available at: http://localhost:{settings.port}")
    print("API endpoints:")
    for endpoint in ENDPOINTS:
        print(f"   - {endpoint}")
    print("\nStarting Flask server...")

    app = create_app(settings)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
