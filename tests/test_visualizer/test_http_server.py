import pytest

from group_control.system import Dispatcher
from simulator.core.elevator_state import Direction
from simulator.infrastructure.command_channel import Command
from visualizer.http_server import create_app


@pytest.fixture
def fleet(make_handle):
    return [make_handle(0, 0), make_handle(1, 6, Direction.UP, {9})]


@pytest.fixture
def client(fleet, broker):
    app = create_app(Dispatcher(fleet, broker=broker))
    app.config['TESTING'] = True
    return app.test_client()


def test_status(client):
    response = client.get('/api/status')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'ok'
    assert body['elevators'] == 2


def test_list_elevators(client):
    response = client.get('/api/elevators')
    assert response.status_code == 200
    assert response.get_json() == [
        {'id': 0, 'current_floor': 0, 'direction': 'IDLE', 'stops': []},
        {'id': 1, 'current_floor': 6, 'direction': 'UP', 'stops': [9]},
    ]


def test_request_assigns_elevator(client, fleet):
    response = client.post('/api/requests', json={'floor': 7, 'direction': 'UP'})
    assert response.status_code == 200
    assert response.get_json() == {'floor': 7, 'direction': 'UP', 'assigned_elevator': 1}
    assert fleet[1].channel.drain() == [Command.add_stop(7)]


def test_request_direction_defaults_to_up(client):
    response = client.post('/api/requests', json={'floor': 2})
    assert response.get_json()['direction'] == 'UP'


def test_request_on_empty_fleet(broker):
    client = create_app(Dispatcher([], broker=broker)).test_client()
    response = client.post('/api/requests', json={'floor': 2, 'direction': 'DOWN'})
    assert response.status_code == 200
    assert response.get_json()['assigned_elevator'] is None


@pytest.mark.parametrize("body", [
    {'direction': 'UP'},
    {'floor': '3', 'direction': 'UP'},
    {'floor': True},
    {'floor': 3, 'direction': 'IDLE'},
    {'floor': 3, 'direction': 'LEFT'},
])
def test_request_validation(client, body):
    response = client.post('/api/requests', json=body)
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_request_requires_json_object(client):
    response = client.post('/api/requests', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_trigger_status(client, fleet):
    response = client.post('/api/elevators/status')
    assert response.get_json() == {'notified': [0, 1]}
    assert fleet[0].channel.drain() == [Command.status()]
