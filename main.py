"""
Web Content Analyzer Cloud Function

Fetches a webpage, extracts its readable text and metadata, and asks Gemini
for a structured content analysis.

Routes:
- POST /analyze   {"url": "..."} -> {"success": true, "analysis": {...}}
- GET  /health    -> {"status": "Server is running", "timestamp": "..."}
- OPTIONS *       -> CORS preflight

Run locally with `python main.py` (listens on PORT, default 3000) or
`functions-framework --target=analyze_page`.
"""

import logging

import functions_framework

from content_analyzer import (
    AnalysisClient,
    PageAnalyzer,
    configure_logging,
    handle_analyze,
    handle_health,
    json_response,
    load_settings,
    preflight_response,
)

SETTINGS = load_settings()
configure_logging(SETTINGS.log_level)
logger = logging.getLogger(__name__)

ANALYZER = PageAnalyzer(
    AnalysisClient(
        SETTINGS.gemini_api_key,
        model_name=SETTINGS.gemini_model,
        timeout=SETTINGS.analysis_timeout,
    ),
    fetch_timeout=SETTINGS.fetch_timeout,
)

ROUTES = {
    '/analyze': 'POST',
    '/health': 'GET',
}


@functions_framework.http
def analyze_page(request):
    """Main Cloud Function entry point."""
    if request.method == 'OPTIONS':
        return preflight_response()

    path = (request.path or '/').rstrip('/') or '/'
    expected_method = ROUTES.get(path)

    if expected_method is None:
        return json_response({'error': 'Not found'}, 404)
    if request.method != expected_method:
        return json_response({'error': 'Method not allowed'}, 405)

    if path == '/health':
        return handle_health()
    return handle_analyze(request, ANALYZER)


def serve():
    """Run the function on a local Flask server."""
    app = functions_framework.create_app(target='analyze_page', source=__file__)
    logger.info("Server running on port %s", SETTINGS.port)
    if not SETTINGS.gemini_api_key:
        logger.warning("Make sure to set GEMINI_API_KEY in your environment variables")
    app.run(host='0.0.0.0', port=SETTINGS.port)


if __name__ == '__main__':
    serve()
