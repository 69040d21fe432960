# interfaces/google_speech.py

import hashlib
import logging
import os

from google.cloud import texttospeech

from lingotouch.errors import SpeechSynthesisError
from lingotouch.interfaces.interface import SpeechOutput

logger = logging.getLogger(__name__)


class GoogleSpeechOutput(SpeechOutput):
    """
    Speech synthesis through Google Cloud Text-to-Speech.
    Audio is cached to disk so the same sentence is only synthesised once.
    """

    def __init__(self, audio_dir, speaking_rate=0.9, pitch=0.0, client=None):
        self.audio_dir = audio_dir
        self.speaking_rate = speaking_rate
        self.pitch = pitch
        self.client = client or texttospeech.TextToSpeechClient()
        os.makedirs(self.audio_dir, exist_ok=True)

    @staticmethod
    def audio_filename(text, language):
        digest = hashlib.sha1(f"{language}:{text}".encode('utf-8')).hexdigest()
        return f"{digest}.mp3"

    def speak(self, text, language):
        filename = self.audio_filename(text, language)
        audio_path = os.path.join(self.audio_dir, filename)

        if os.path.exists(audio_path):
            logger.debug(f"Using cached audio {audio_path}")
            return filename

        try:
            synthesis_input = texttospeech.SynthesisInput(text=text)

            voice = texttospeech.VoiceSelectionParams(
                language_code=language,
                ssml_gender=texttospeech.SsmlVoiceGender.NEUTRAL
            )

            audio_config = texttospeech.AudioConfig(
                audio_encoding=texttospeech.AudioEncoding.MP3,
                speaking_rate=self.speaking_rate,
                pitch=self.pitch,
                volume_gain_db=0.0
            )

            response = self.client.synthesize_speech(
                input=synthesis_input, voice=voice, audio_config=audio_config
            )
        except Exception as e:
            logger.error(f"Error during TTS synthesis for '{text}': {e}")
            raise SpeechSynthesisError(f"Speech synthesis failed: {e}") from e

        # Only complete files ever sit at audio_path.
        partial_path = f"{audio_path}.part"
        try:
            with open(partial_path, 'wb') as out:
                out.write(response.audio_content)
            os.replace(partial_path, audio_path)
        except OSError as e:
            logger.error(f"Failed to write audio to {audio_path}: {e}")
            if os.path.exists(partial_path):
                os.remove(partial_path)
            raise SpeechSynthesisError(f"Could not store synthesised audio: {e}") from e
        logger.debug(f"Audio content written to {audio_path}")
        return filename
