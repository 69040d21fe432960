# config.py

import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default):
    return os.environ.get(name, str(default)).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_pattern(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return tuple(int(part) for part in value.split(','))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')  # Replace with a secure key

    # Remote translation service
    TRANSLATE_API_URL = os.environ.get('TRANSLATE_API_URL', 'http://localhost:5000/api/translate')
    TRANSLATE_TIMEOUT = float(os.environ.get('TRANSLATE_TIMEOUT', 10))

    # Sign language animation images
    SIGN_ANIMATION_URL = os.environ.get('SIGN_ANIMATION_URL', 'https://media.signlanguageapi.com/animate')

    # Use in-memory speech and vibration devices instead of Google and the serial motor
    USE_MOCK_DEVICES = _env_flag('USE_MOCK_DEVICES', False)

    # Vibration motor configuration
    SERIAL_PORT = os.environ.get('SERIAL_PORT', '/dev/ttyACM0')  # e.g. '/dev/ttyUSB0' on Linux
    BAUD_RATE = int(os.environ.get('BAUD_RATE', 9600))          # Must match Arduino's Serial.begin rate
    VIBRATION_PATTERN = _env_pattern('VIBRATION_PATTERN', (100, 50, 100))

    # Speech synthesis
    AUDIO_DIR = os.environ.get('AUDIO_DIR', os.path.join(BASE_DIR, 'audio_files'))
    SPEECH_RATE = float(os.environ.get('SPEECH_RATE', 0.9))
    SPEECH_PITCH = float(os.environ.get('SPEECH_PITCH', 0.0))

    BRAILLE_FILENAME = 'braille.txt'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')
    LOG_FILE = os.environ.get('LOG_FILE')  # e.g. 'app.log'


class TestingConfig(Config):
    TESTING = True
    USE_MOCK_DEVICES = True
    TRANSLATE_API_URL = 'http://translate.test/api/translate'
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = None
