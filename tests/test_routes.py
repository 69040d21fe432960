# tests/test_routes.py

import io
from unittest import mock

import pytest

from lingotouch.errors import SpeechSynthesisError, TranslationError


@pytest.fixture
def translate_to(devices):
    """Make the translation service answer with the given string."""
    def _translate_to(translated):
        devices['translator'].translate = mock.Mock(return_value=translated)
        return devices['translator'].translate
    return _translate_to


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_unknown_route_returns_json(client):
    response = client.get('/does-not-exist')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}


def test_index_renders_accessibility_settings(client):
    response = client.get('/?highContrast=on&dyslexiaFont=true&targetLang=fr')
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert 'LingoTouch Translator' in page
    assert 'high-contrast' in page
    assert 'OpenDyslexic' in page
    assert '<option value="fr" selected>' in page


def test_index_ignores_bad_language(client):
    response = client.get('/?targetLang=xx')
    assert response.status_code == 200
    assert '<option value="es" selected>' in response.get_data(as_text=True)


def test_languages(client):
    languages = client.get('/languages').get_json()['languages']
    assert [language['code'] for language in languages] == ['en', 'es', 'fr', 'de', 'hi', 'bn']
    assert languages[1] == {'code': 'es', 'name': 'Spanish', 'locale': 'es-ES'}


def test_translate(client, devices, translate_to):
    translate = translate_to('Hola Bob')

    response = client.post('/translate', json={'text': 'Hi Bob', 'sourceLang': 'en', 'targetLang': 'es'})

    assert response.status_code == 200
    data = response.get_json()
    assert data['translated'] == 'Hola Bob'
    assert data['braille'] == '⠓⠕⠇⠁ ⠃⠕⠃'
    assert data['signAnimationUrl'] == 'https://media.signlanguageapi.com/animate?text=Hola%20Bob'
    assert data['audioUrl'] is None
    assert data['vibrated'] is True
    assert data['warnings'] == []
    assert data['settings']['targetLang'] == 'es'

    sent_text, sent_settings = translate.call_args[0]
    assert sent_text == 'Hi Bob'
    assert sent_settings.to_request(sent_text) == {'text': 'Hi Bob', 'sourceLang': 'en', 'targetLang': 'es'}
    assert devices['speech_output'].spoken == [('Hola Bob', 'es-ES')]
    assert devices['haptics'].patterns == [(100, 50, 100)]


def test_translate_posts_to_configured_service(client):
    with mock.patch('lingotouch.translation.requests.post') as post:
        post.return_value.json.return_value = {'translated': 'Bonjour'}
        response = client.post('/translate', json={'text': 'Hello', 'targetLang': 'fr'})

    assert response.status_code == 200
    assert response.get_json()['braille'] == '⠃⠕⠝⠚⠕⠥⠗'
    assert post.call_args[0][0] == 'http://translate.test/api/translate'
    assert post.call_args[1]['json'] == {'text': 'Hello', 'sourceLang': 'en', 'targetLang': 'fr'}


def test_translate_returns_audio_url(client, devices, translate_to):
    translate_to('Hola')
    devices['speech_output'].speak = mock.Mock(return_value='abc.mp3')

    data = client.post('/translate', json={'text': 'Hello'}).get_json()

    assert data['audioUrl'] == '/speech/audio/abc.mp3'


@pytest.mark.parametrize('body', [{}, {'text': ''}, {'text': '   '}, {'text': 5}])
def test_translate_requires_text(client, body):
    response = client.post('/translate', json=body)
    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize('language', ['klingon', ['es'], {'code': 'es'}, 7])
def test_translate_rejects_unknown_language(client, language):
    response = client.post('/translate', json={'text': 'Hello', 'targetLang': language})
    assert response.status_code == 400
    assert 'Unsupported language' in response.get_json()['error']


@pytest.mark.parametrize('url', ['/translate', '/braille', '/braille/download'])
@pytest.mark.parametrize('body', [['Hello'], 'cat', 42])
def test_non_object_json_body_is_rejected(client, url, body):
    response = client.post(url, json=body)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Request body must be a JSON object.'}


def test_translate_service_failure(client, devices):
    devices['translator'].translate = mock.Mock(side_effect=TranslationError('Translation service unavailable'))
    response = client.post('/translate', json={'text': 'Hello'})
    assert response.status_code == 502
    assert response.get_json() == {'error': 'Translation service unavailable'}


def test_translate_speech_failure_is_a_warning(client, devices, translate_to):
    translate_to('Hallo')
    devices['speech_output'].speak = mock.Mock(side_effect=SpeechSynthesisError('Speech synthesis failed'))

    response = client.post('/translate', json={'text': 'Hello', 'targetLang': 'de'})

    assert response.status_code == 200
    data = response.get_json()
    assert data['braille'] == '⠓⠁⠇⠇⠕'
    assert data['warnings'] == ['Speech synthesis failed']


def test_braille(client):
    assert client.post('/braille', json={'text': 'cat'}).get_json() == {'braille': '⠉⠁⠞'}
    assert client.post('/braille', json={'text': '123!'}).get_json() == {'braille': ''}
    assert client.post('/braille', data={'text': 'a b'}).get_json() == {'braille': '⠁ ⠃'}


def test_braille_requires_string(client):
    assert client.post('/braille', json={'text': ['a']}).status_code == 400
    assert client.post('/braille', json={}).status_code == 400


def test_download_braille(client):
    response = client.post('/braille/download', data={'text': '⠓⠊ ⠃⠕⠃'})
    assert response.status_code == 200
    assert response.data == '⠓⠊ ⠃⠕⠃'.encode('utf-8')
    assert response.mimetype == 'text/plain'
    assert response.mimetype_params['charset'] == 'utf-8'
    assert 'attachment' in response.headers['Content-Disposition']
    assert 'braille.txt' in response.headers['Content-Disposition']


def test_download_empty_braille(client):
    response = client.post('/braille/download', json={'text': ''})
    assert response.status_code == 200
    assert response.data == b''


def test_transcribe(client, devices):
    devices['speech_input'].transcripts.append('good morning')
    response = client.post(
        '/speech/transcribe',
        data={'sourceLang': 'fr', 'audio': (io.BytesIO(b'RIFF'), 'clip.wav')},
        content_type='multipart/form-data'
    )
    assert response.status_code == 200
    assert response.get_json() == {'text': 'good morning'}
    assert devices['speech_input'].calls == ['fr-FR']


def test_transcribe_requires_audio(client):
    response = client.post('/speech/transcribe', data={'sourceLang': 'en'}, content_type='multipart/form-data')
    assert response.status_code == 400


def test_transcribe_nothing_recognised(client):
    response = client.post(
        '/speech/transcribe',
        data={'audio': (io.BytesIO(b'RIFF'), 'clip.wav')},
        content_type='multipart/form-data'
    )
    assert response.status_code == 422


def test_speech_audio(client, app, tmp_path):
    audio_dir = tmp_path / 'audio'
    audio_dir.mkdir()
    (audio_dir / 'abc.mp3').write_bytes(b'ID3')

    response = client.get('/speech/audio/abc.mp3')
    assert response.status_code == 200
    assert response.mimetype == 'audio/mpeg'
    assert response.data == b'ID3'

    assert client.get('/speech/audio/missing.mp3').status_code == 404


def test_sign_animation(client):
    data = client.get('/sign_animation', query_string={'text': 'Hola Bob'}).get_json()
    assert data == {'url': 'https://media.signlanguageapi.com/animate?text=Hola%20Bob'}
    assert client.get('/sign_animation').get_json() == {'url': None}


def test_index_has_speech_input_control(client):
    page = client.get('/').get_data(as_text=True)
    assert 'id="speakButton"' in page
    assert '/speech/transcribe' in page


def test_index_language_selects_submit_with_toggles(client):
    page = client.get('/?sourceLang=de&targetLang=hi').get_data(as_text=True)
    form = page[page.index('<form method="get"'):page.index('</form>')]
    assert '<select id="sourceLang" name="sourceLang">' in form
    assert '<select id="targetLang" name="targetLang">' in form
    assert 'type="hidden"' not in form
    assert '<option value="de" selected>' in form
    assert '<option value="hi" selected>' in form
