import pytest
from binstats.demanglers import reset_demangler, set_demangler
import server.app as server_app


NM_OUTPUT = (
    "0000000000001000 400 T main\n"
    "0000000000001200 200 t helper\n"
    "0000000000004000 100 D config\n"
    "0000000000005000 100 b buffer\n"
)


@pytest.fixture
def client():
    set_demangler('none')
    server_app.current_read = None
    server_app.app.config['TESTING'] = True
    with server_app.app.test_client() as client:
        yield client
    server_app.current_read = None
    reset_demangler()


class TestSubmitSymbols:
    def test_submit_plain_text(self, client):
        response = client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        assert response.status_code == 200
        assert response.get_json()['symbols'] == 4
        assert server_app.current_read is not None

    def test_submit_json(self, client):
        response = client.post('/api/symbols', json={'output': NM_OUTPUT})
        assert response.status_code == 200
        assert response.get_json()['status'] == "success"

    def test_submit_json_without_output(self, client):
        response = client.post('/api/symbols', json={})
        assert response.status_code == 400

    def test_submit_unreadable_output_keeps_snapshot(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        previous = server_app.current_read

        response = client.post('/api/symbols', data="nm: a.out: no symbols\n", content_type='text/plain')
        assert response.status_code == 422
        assert response.get_json()['first_line'] == "nm: a.out: no symbols"
        assert server_app.current_read is previous


class TestSymbolsStatus:
    def test_status_before_read(self, client):
        response = client.get('/api/symbols/status')
        assert response.status_code == 404

    def test_status_after_read(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        response = client.get('/api/symbols/status')
        assert response.get_json()['symbols'] == 4
        assert response.get_json()['total_size'] == 800


class TestStats:
    def test_stats_before_read(self, client):
        response = client.get('/api/stats')
        assert response.status_code == 404

    def test_stats_all_enabled(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        data = client.get('/api/stats').get_json()
        assert data['total'] == {'type': '_', 'size': 800, 'symbols': 4}
        assert [row['type'] for row in data['stats']] == ['_', 'T', 'B', 'D']
        assert [row['name'] for row in data['symbols']] == ["main", "helper", "config", "buffer"]

    def test_stats_with_filters(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        data = client.get('/api/stats?disabled=T&local=0').get_json()
        assert [row['name'] for row in data['symbols']] == ["config"]
        assert data['filter']['disabled'] == ['T']
        assert data['filter']['local'] is False

    def test_stats_with_pattern(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        data = client.get('/api/stats', query_string={'pattern': '*er'}).get_json()
        assert [row['name'] for row in data['symbols']] == ["helper", "buffer"]

    def test_stats_invalid_type(self, client):
        client.post('/api/symbols', data=NM_OUTPUT, content_type='text/plain')
        response = client.get('/api/stats?disabled=1')
        assert response.status_code == 400


class TestCatalogues:
    def test_types(self, client):
        data = client.get('/api/types').get_json()
        assert {'type': 'T', 'description': "code"} in data

    def test_available_demanglers(self, client):
        data = client.get('/api/available/demanglers').get_json()
        assert [d['id'] for d in data] == ['cxxfilt', 'none']
