import os
import sys
import json
import xml.etree.ElementTree as ET
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Response

from http_errors.error_renderer import ErrorRenderer, cdata
from http_errors.exceptions import UnsupportedContentType
from http_errors.settings import RenderOptions

DETAILS = RenderOptions(display_error_details=True)


def _request(accept=None, method='GET'):
    headers = {'Accept': accept} if accept is not None else {}
    return EnvironBuilder(method=method, headers=headers).get_request()


def test_json_without_details(chained_error, recording_logger):
    resp = ErrorRenderer(logger=recording_logger)(_request('application/json'), None, chained_error)
    assert resp.status_code == 500
    assert resp.headers['Content-Type'] == 'application/json'
    body = json.loads(resp.get_data(as_text=True))
    assert body == {'message': 'Application Runtime Error(from RuntimeError)'}
    for key in ('file', 'line', 'trace'):
        assert key not in resp.get_data(as_text=True)


def test_json_is_pretty_printed(simple_error, recording_logger):
    resp = ErrorRenderer(logger=recording_logger)(_request('application/json'), None, simple_error)
    assert '\n    "message"' in resp.get_data(as_text=True)


def test_json_with_details(chained_error, recording_logger):
    renderer = ErrorRenderer(DETAILS, recording_logger)
    body = json.loads(renderer(_request('application/json'), None, chained_error).get_data(as_text=True))
    records = body['exception']
    assert [r['message'] for r in records] == ['could not save report', 'disk <full>']
    assert records[1]['code'] == 42
    assert isinstance(records[0]['trace'], list)
    assert records[0]['line'] > 0


def test_xml_without_details(simple_error, recording_logger):
    resp = ErrorRenderer(logger=recording_logger)(_request('text/xml'), None, simple_error)
    assert resp.headers['Content-Type'] == 'text/xml'
    assert resp.get_data(as_text=True) == '<error>\n  <message>Application Runtime Error</message>\n</error>'


@pytest.mark.parametrize('accept', ['application/xml', 'text/xml'])
def test_xml_with_details(chained_error, recording_logger, accept):
    resp = ErrorRenderer(DETAILS, recording_logger)(_request(accept), None, chained_error)
    assert resp.headers['Content-Type'] == accept
    root = ET.fromstring(resp.get_data(as_text=True))
    assert root.find('message').text == 'Application Runtime Error'
    errors = root.findall('error')
    assert errors[0].find('type').text == 'RuntimeError'
    assert errors[1].find('message').text == 'disk <full>'
    assert errors[1].find('code').text == '42'


def test_xml_cdata_terminator_survives(recording_logger):
    try:
        raise ValueError('before ]]> after')
    except ValueError as e:
        err = e
    resp = ErrorRenderer(DETAILS, recording_logger)(_request('application/xml'), None, err)
    root = ET.fromstring(resp.get_data(as_text=True))
    assert root.find('error').find('message').text == 'before ]]> after'


def test_cdata_helper():
    assert cdata('a]]>b') == '<![CDATA[a]]]]><![CDATA[>b]]>'


def test_html_without_details(chained_error, recording_logger):
    resp = ErrorRenderer(logger=recording_logger)(_request('text/html'), None, chained_error)
    html = resp.get_data(as_text=True)
    assert resp.headers['Content-Type'] == 'text/html'
    assert '<title>Application Runtime Error</title>' in html
    assert 'A website error has occurred. Sorry for the temporary inconvenience.' in html
    assert 'could not save report' not in html


def test_html_with_details_escapes_message(chained_error, recording_logger):
    html = ErrorRenderer(DETAILS, recording_logger)(_request(), None, chained_error).get_data(as_text=True)
    assert '<h2>Details</h2>' in html
    assert html.count('<h2>Previous exception</h2>') == 1
    assert 'disk &lt;full&gt;' in html
    assert 'disk <full>' not in html
    assert '<div><strong>Code:</strong> 42</div>' in html
    assert '<h2>Trace</h2>' in html


def test_html_hides_root_path(recording_logger):
    try:
        raise RuntimeError('cannot open /srv/app/config/settings.ini')
    except RuntimeError as e:
        err = e
    opts = DETAILS.with_changes(root_path='/srv/app', hide_root_path=True, root_path_placeholder='{root}')
    html = ErrorRenderer(opts, recording_logger)(_request('text/html'), None, err).get_data(as_text=True)
    assert '/srv/app' not in html
    assert '{root}/config/settings.ini' in html


def test_html_hides_root_path_with_escapable_characters(recording_logger):
    try:
        raise RuntimeError("cannot open /srv/o'neil/app/cfg.ini")
    except RuntimeError as e:
        err = e
    opts = DETAILS.with_changes(root_path="/srv/o'neil/app", hide_root_path=True)
    html = ErrorRenderer(opts, recording_logger)(_request('text/html'), None, err).get_data(as_text=True)
    assert 'o&#39;neil' not in html
    assert "o'neil" not in html
    assert '{root}/cfg.ini' in html


def test_html_keeps_root_path_when_not_hidden(recording_logger):
    try:
        raise RuntimeError('cannot open /srv/app/x')
    except RuntimeError as e:
        err = e
    opts = DETAILS.with_changes(root_path='/srv/app')
    html = ErrorRenderer(opts, recording_logger)(_request('text/html'), None, err).get_data(as_text=True)
    assert '/srv/app/x' in html


def test_always_logs_full_chain(chained_error, recording_logger):
    ErrorRenderer(logger=recording_logger)(_request('application/json'), None, chained_error)
    assert len(recording_logger.messages) == 1
    logged = recording_logger.messages[0]
    assert 'Type: RuntimeError' in logged
    assert 'Previous error:' in logged
    assert 'Message: disk <full>' in logged


def test_response_is_new_instance_with_carried_headers(simple_error, recording_logger):
    original = Response('ok', status=200, headers={'X-Request-Id': 'abc'})
    resp = ErrorRenderer(logger=recording_logger)(_request('application/json'), original, simple_error)
    assert resp is not original
    assert resp.headers['X-Request-Id'] == 'abc'
    assert resp.status_code == 500
    assert original.status_code == 200
    assert original.get_data(as_text=True) == 'ok'


def test_unknown_content_type_raises(simple_error, recording_logger):
    renderer = ErrorRenderer(logger=recording_logger)
    with pytest.raises(UnsupportedContentType) as info:
        renderer.render_body('text/csv', simple_error)
    assert info.value.content_type == 'text/csv'
    assert recording_logger.messages == []
