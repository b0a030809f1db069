"""
Flask API for the Cleaning Quote Generator
REST endpoints for quote calculation and PDF download
"""

import logging
from datetime import datetime
from io import BytesIO
from typing import Optional

from flask import Flask, request, jsonify, send_file
from flask_cors import CORS

from cleanquote.config import Settings, get_settings
from cleanquote.errors import QuoteError
from cleanquote.models.quote import QuoteInput
from cleanquote.pdf_generator import QuotePDFGenerator
from cleanquote.quote_engine import compute_quote
from cleanquote.utils import default_quote_input, get_option_catalog, validate_quote_payload

logger = logging.getLogger(__name__)


ENDPOINTS = [
    "GET  /api/health",
    "GET  /api/options",
    "GET  /api/quotes/default",
    "POST /api/quotes/calculate",
    "POST /api/quotes/pdf",
]


def _read_quote_input():
    """
    Parse the request body into a QuoteInput
    Returns (quote_input, error_response)
    """
    data = request.get_json(silent=True)
    if data is None:
        return None, (jsonify({'error': 'Request body must be JSON'}), 400)

    errors = validate_quote_payload(data)
    if errors:
        return None, (jsonify({'error': 'Validation failed', 'details': errors}), 400)

    return QuoteInput.from_dict(data), None


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask application"""
    settings = settings or get_settings()

    app = Flask(__name__)
    app.config['CLEANQUOTE_SETTINGS'] = settings
    CORS(app, origins=settings.cors_origin_list)

    @app.errorhandler(QuoteError)
    def handle_quote_error(e):
        return jsonify(e.to_dict()), 400

    @app.route('/')
    def index():
        """Describe the service"""
        return jsonify({
            'service': 'cleaning-quote-generator',
            'company': settings.company_name,
            'endpoints': ENDPOINTS
        })

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({'status': 'healthy', 'service': 'cleaning-quote-generator'})

    @app.route('/api/options', methods=['GET'])
    def get_options():
        """Selectable options, rates and margin bounds for quote forms"""
        return jsonify(get_option_catalog())

    @app.route('/api/quotes/default', methods=['GET'])
    def get_default_quote():
        """Blank form starting values"""
        return jsonify(default_quote_input().to_dict())

    @app.route('/api/quotes/calculate', methods=['POST'])
    def calculate():
        """Calculate a quote from facility parameters"""
        try:
            quote_input, error = _read_quote_input()
            if error:
                return error

            result = compute_quote(quote_input)

            return jsonify({
                'success': True,
                'quote': result.to_dict(),
                'breakdown': [item.to_dict() for item in result.nonzero_line_items()]
            })

        except QuoteError:
            raise
        except Exception as e:
            logger.exception("Quote calculation failed")
            return jsonify({'error': str(e)}), 500

    @app.route('/api/quotes/pdf', methods=['POST'])
    def download_pdf():
        """
        Generate a PDF quote from the request body

        Request body: the same fields as /api/quotes/calculate

        Returns:
            PDF file download
        """
        try:
            quote_input, error = _read_quote_input()
            if error:
                return error

            result = compute_quote(quote_input)
            generator = QuotePDFGenerator(quote_input, result, company_name=settings.company_name)
            pdf_bytes = generator.generate_bytes()
            logger.info("Generated quote PDF (final quote %.2f)", result.final_quote)

            return send_file(
                BytesIO(pdf_bytes),
                mimetype='application/pdf',
                as_attachment=True,
                download_name=f"Cleaning_Quote_{datetime.now().strftime('%Y%m%d')}.pdf"
            )

        except QuoteError:
            raise
        except Exception as e:
            logger.exception("PDF generation failed")
            return jsonify({'error': str(e)}), 500

    return app
