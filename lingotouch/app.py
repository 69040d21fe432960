# app.py

import logging

from flask import Flask, g, jsonify

from lingotouch.config import Config
from lingotouch.interfaces.mock_devices import MockHapticFeedback, MockSpeechInput, MockSpeechOutput
from lingotouch.translation import TranslationClient


def _configure_logging(app):
    handlers = [logging.StreamHandler()]          # Logs to the console
    if app.config.get('LOG_FILE'):
        handlers.append(logging.FileHandler(app.config['LOG_FILE']))

    level = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=handlers
    )
    app.logger.setLevel(level)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)


def _create_devices(app):
    """
    Pick the speech and vibration adapters.
    Real devices are imported lazily so the mock setup needs no Google or serial libraries.
    """
    if app.config['USE_MOCK_DEVICES']:
        app.logger.info("Using mock speech and haptic devices.")
        return MockSpeechInput(), MockSpeechOutput(), MockHapticFeedback()

    from lingotouch.interfaces.google_speech import GoogleSpeechOutput
    from lingotouch.interfaces.recognizer_speech import RecognizerSpeechInput
    from lingotouch.interfaces.serial_haptics import SerialHapticFeedback

    speech_output = GoogleSpeechOutput(
        app.config['AUDIO_DIR'],
        speaking_rate=app.config['SPEECH_RATE'],
        pitch=app.config['SPEECH_PITCH']
    )
    haptics = SerialHapticFeedback(port=app.config['SERIAL_PORT'], baudrate=app.config['BAUD_RATE'])
    if haptics.available:
        app.logger.info("Using SerialHapticFeedback.")
    else:
        app.logger.error("SerialHapticFeedback initialization failed. Falling back to MockHapticFeedback.")
        haptics = MockHapticFeedback()
    return RecognizerSpeechInput(), speech_output, haptics


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    translator = TranslationClient(app.config['TRANSLATE_API_URL'], timeout=app.config['TRANSLATE_TIMEOUT'])
    speech_input, speech_output, haptics = _create_devices(app)

    # Keep the adapters reachable from tests and CLI code
    app.extensions['lingotouch'] = {
        'translator': translator,
        'speech_input': speech_input,
        'speech_output': speech_output,
        'haptics': haptics,
    }

    # Attach the collaborators to the app context before each request
    @app.before_request
    def before_request():
        devices = app.extensions['lingotouch']
        g.translator = devices['translator']
        g.speech_input = devices['speech_input']
        g.speech_output = devices['speech_output']
        g.haptics = devices['haptics']

    from lingotouch.blueprints.translator import translator_bp
    app.register_blueprint(translator_bp)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({'status': 'healthy', 'service': 'lingotouch'})

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Internal error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=False, host='0.0.0.0')
