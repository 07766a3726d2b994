"""
API Routes
==========
Flask blueprints for all API endpoints.
"""
import time
from flask import Blueprint, request, jsonify

from ae_lingo.config import config
from ae_lingo.config.constants import (
    IMAGE_SNIPPET,
    MSG_EMPTY_TEXT,
    MSG_NO_IMAGE,
    MSG_EMPTY_RESULT,
    MSG_SERVICE_UNAVAILABLE
)
from ae_lingo.exceptions import (
    InvalidInputKindError,
    MissingCredentialError,
    TranslationServiceUnavailableError
)
from ae_lingo.models.schemas import TranslateResponse, HealthStatus
from ae_lingo.models.translation import TranslationRequest
from ae_lingo.services.gemini_client import get_gemini_client
from ae_lingo.services.history import get_history_service, make_snippet
from ae_lingo.services.terminology import get_terminology
from ae_lingo.services.translator import get_translator
from ae_lingo.api.middleware import single_flight, get_metrics_collector, get_single_flight_gate
from ae_lingo.utils.validators import (
    validate_text,
    validate_image_payload,
    read_uploaded_image,
    decode_image_data
)
from ae_lingo.utils.logging import get_logger, log_buffer


def _run_translation(translation_request: TranslationRequest, snippet: str):
    """Translate, record the outcome and build the JSON response."""
    logger = get_logger().api_logger
    metrics = get_metrics_collector()
    start_time = time.time()

    try:
        items = get_translator().translate(translation_request)
    except InvalidInputKindError as e:
        metrics.record('failed')
        return jsonify({'error': str(e), 'code': e.code}), 415
    except (MissingCredentialError, TranslationServiceUnavailableError) as e:
        logger.error(f"Translation failed [{e.code}]: {e}")
        metrics.record('failed')
        return jsonify({'error': MSG_SERVICE_UNAVAILABLE, 'code': e.code}), 503

    elapsed = time.time() - start_time

    if not items:
        metrics.record('empty', elapsed)
        return jsonify(TranslateResponse(message=MSG_EMPTY_RESULT).to_dict())

    entry = get_history_service().add(translation_request.kind, snippet, items)
    metrics.record('success', elapsed)
    return jsonify(TranslateResponse(results=items, history_id=entry.id).to_dict())


def create_translation_blueprint() -> Blueprint:
    """Create translation routes blueprint."""
    bp = Blueprint('translations', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    @bp.route('/translate/text', methods=['POST'])
    @single_flight
    def translate_text():
        """Translate typed parameter names."""
        payload = request.get_json(silent=True) or {}
        text = payload.get('text', request.form.get('text'))

        if text is not None and not isinstance(text, str):
            return jsonify({'error': 'text must be a string'}), 400

        valid, _ = validate_text(text)
        if not valid:
            return jsonify({'error': MSG_EMPTY_TEXT}), 400

        logger.info(f"Text translation requested ({len(text)} chars)")
        return _run_translation(TranslationRequest.text(text), make_snippet(text))

    @bp.route('/translate/image', methods=['POST'])
    @single_flight
    def translate_image():
        """Translate a screenshot sent as a file upload or a data URL."""
        if 'image' in request.files:
            data, mime_type = read_uploaded_image(request.files['image'])
        else:
            payload = request.get_json(silent=True) or {}
            raw = payload.get('image')
            if not raw or not isinstance(raw, str):
                data, mime_type = b"", None
            else:
                try:
                    data, mime_type = decode_image_data(raw, payload.get('mime_type'))
                except ValueError as e:
                    return jsonify({'error': str(e)}), 400

        valid, error, status = validate_image_payload(data, mime_type)
        if not valid:
            if status == 400:
                return jsonify({'error': MSG_NO_IMAGE}), 400
            code = InvalidInputKindError.code if status == 415 else 'too_large'
            return jsonify({'error': error, 'code': code}), status

        logger.info(f"Image translation requested ({mime_type}, {len(data)} bytes)")
        return _run_translation(TranslationRequest.image(data, mime_type), IMAGE_SNIPPET)

    return bp


def create_history_blueprint() -> Blueprint:
    """Create history routes blueprint."""
    bp = Blueprint('history', __name__, url_prefix='/api')

    @bp.route('/history', methods=['GET'])
    def list_history():
        """List recent translations, newest first."""
        entries = get_history_service().list()
        return jsonify({'history': [entry.to_dict() for entry in entries]})

    @bp.route('/history/<entry_id>', methods=['GET'])
    def get_history_entry(entry_id: str):
        """Get one history entry to restore its results."""
        entry = get_history_service().get(entry_id)
        if not entry:
            return jsonify({'error': 'History entry not found'}), 404
        return jsonify(entry.to_dict())

    @bp.route('/history', methods=['DELETE'])
    def clear_history():
        """Clear the history."""
        get_history_service().clear()
        return jsonify({'message': 'History cleared'})

    return bp


def create_health_blueprint() -> Blueprint:
    """Create health check routes blueprint."""
    bp = Blueprint('health', __name__, url_prefix='/api')

    @bp.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        from ae_lingo import __version__

        has_key = config.gemini.has_api_key
        reachable = None
        if has_key:
            reachable = get_gemini_client().is_healthy(config.gemini.api_key.strip())

        status = HealthStatus(
            status='healthy' if has_key and reachable else 'degraded',
            credential_configured=has_key,
            gemini_reachable=reachable,
            model=config.gemini.default_model,
            version=__version__
        )
        return jsonify(status.to_dict())

    @bp.route('/metrics', methods=['GET'])
    def get_metrics():
        """Get application metrics."""
        import psutil

        process = psutil.Process()
        system_metrics = {
            'cpu_percent': psutil.cpu_percent(interval=0.1),
            'memory_percent': psutil.virtual_memory().percent,
            'process_memory_mb': round(process.memory_info().rss / (1024 * 1024), 1),
            'uptime': time.time() - process.create_time()
        }

        return jsonify({
            'translation_metrics': get_metrics_collector().snapshot(),
            'system_metrics': system_metrics,
            'busy': get_single_flight_gate().busy
        })

    @bp.route('/glossary', methods=['GET'])
    def get_glossary():
        """Get the terminology glossary sent to the model."""
        terminology = get_terminology()
        return jsonify({
            'version': terminology.version,
            'terms': terminology.terms,
            'count': len(terminology)
        })

    return bp


def create_logs_blueprint() -> Blueprint:
    """Create logs routes blueprint for frontend console panel."""
    bp = Blueprint('logs', __name__)

    @bp.route('/logs', methods=['GET'])
    def get_logs():
        """Get logs from in-memory buffer for the frontend console panel."""
        since_id = request.args.get('since', 0, type=int)
        return jsonify({'logs': log_buffer.entries(since_id)})

    @bp.route('/logs/clear', methods=['POST'])
    def clear_logs():
        """Clear the log buffer."""
        log_buffer.clear()
        return jsonify({'message': 'Logs cleared'})

    return bp
