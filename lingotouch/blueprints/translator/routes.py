# blueprints/translator/routes.py

import logging
import os
from io import BytesIO

from flask import current_app, g, jsonify, render_template, request, send_file, send_from_directory, url_for

from lingotouch.braille import transcode
from lingotouch.errors import SpeechRecognitionError, TranslationError
from lingotouch.export import export_braille
from lingotouch.pipeline import TranslationPipeline
from lingotouch.settings import LANGUAGES, TranslationSettings, speech_locale
from lingotouch.sign_language import animation_url

from . import translator_bp

logger = logging.getLogger(__name__)


def _request_data():
    """
    JSON object body if there is one, otherwise form fields.
    Returns None when the JSON body is not an object.
    """
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    return data if isinstance(data, dict) else None


def _invalid_body():
    return jsonify({'error': 'Request body must be a JSON object.'}), 400


@translator_bp.route('/', methods=['GET'])
def index():
    """
    Render the translator page.
    Accessibility toggles and languages come from the query string.
    """
    try:
        settings = TranslationSettings.from_mapping(request.args)
    except ValueError as e:
        logger.info(f"Ignoring invalid page settings: {e}")
        settings = TranslationSettings()
    return render_template('translator/index.html', settings=settings, languages=LANGUAGES)


@translator_bp.route('/languages', methods=['GET'])
def languages():
    return jsonify({
        'languages': [
            {'code': code, 'name': name, 'locale': locale}
            for code, (name, locale) in LANGUAGES.items()
        ]
    }), 200


@translator_bp.route('/translate', methods=['POST'])
def translate():
    """
    API endpoint that translates text and returns the translation together
    with its braille transcription, audio and sign animation links.
    """
    data = _request_data()
    if data is None:
        return _invalid_body()
    text = data.get('text')
    if not isinstance(text, str) or not text.strip():
        return jsonify({'error': 'Text cannot be empty.'}), 400

    try:
        settings = TranslationSettings.from_mapping(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    pipeline = TranslationPipeline(
        g.translator, g.speech_output, g.haptics,
        vibration_pattern=current_app.config['VIBRATION_PATTERN'],
        animation_base_url=current_app.config['SIGN_ANIMATION_URL']
    )

    try:
        result = pipeline.run(text, settings)
    except TranslationError as e:
        logger.error(f"Translation failed: {e}")
        return jsonify({'error': str(e)}), 502

    audio_url = None
    if result.audio_file:
        audio_url = url_for('translator.speech_audio', filename=result.audio_file)

    return jsonify({
        'text': result.text,
        'translated': result.translated,
        'braille': result.braille,
        'signAnimationUrl': result.sign_animation_url,
        'audioUrl': audio_url,
        'vibrated': result.vibrated,
        'warnings': result.warnings,
        'settings': settings.to_dict()
    }), 200


@translator_bp.route('/braille', methods=['POST'])
def braille():
    data = _request_data()
    if data is None:
        return _invalid_body()
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({'error': 'Text must be a string.'}), 400
    return jsonify({'braille': transcode(text)}), 200


@translator_bp.route('/braille/download', methods=['POST'])
def download_braille():
    """
    Send the braille output back as a text file download.
    """
    data = _request_data()
    if data is None:
        return _invalid_body()
    braille_text = data.get('text', '')
    if not isinstance(braille_text, str):
        return jsonify({'error': 'Text must be a string.'}), 400

    export = export_braille(braille_text, current_app.config['BRAILLE_FILENAME'])
    logger.debug(f"Exporting {len(export.content)} bytes as {export.filename}")
    return send_file(
        BytesIO(export.content),
        mimetype=export.mimetype,
        as_attachment=True,
        download_name=export.filename
    )


@translator_bp.route('/speech/transcribe', methods=['POST'])
def transcribe():
    """
    API endpoint that turns a recorded clip into text in the input language.
    """
    audio = request.files.get('audio')
    if audio is None or not audio.filename:
        return jsonify({'error': 'An audio file is required.'}), 400

    try:
        language = speech_locale(request.form.get('sourceLang') or 'en')
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        transcript = g.speech_input.transcribe(audio.stream, language)
    except SpeechRecognitionError as e:
        logger.info(f"Speech recognition failed: {e}")
        return jsonify({'error': str(e)}), 422

    return jsonify({'text': transcript}), 200


@translator_bp.route('/speech/audio/<path:filename>', methods=['GET'])
def speech_audio(filename):
    """
    Serves synthesised audio from the cache directory.
    """
    audio_dir = current_app.config['AUDIO_DIR']
    if not os.path.isfile(os.path.join(audio_dir, filename)):
        logger.error(f"Audio file '{filename}' not found.")
        return jsonify({'error': 'Audio not found.'}), 404
    return send_from_directory(audio_dir, filename, mimetype='audio/mpeg')


@translator_bp.route('/sign_animation', methods=['GET'])
def sign_animation():
    text = request.args.get('text', '')
    return jsonify({'url': animation_url(text, current_app.config['SIGN_ANIMATION_URL'])}), 200
