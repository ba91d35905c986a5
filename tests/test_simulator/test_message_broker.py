import queue

import pytest

from simulator.infrastructure.message_broker import MessageBroker


def test_publish_reaches_topic_and_broadcast(broker):
    broker.put('gcs/hall_call_assignment', {'floor': 3})

    assert broker.get('gcs/hall_call_assignment', timeout=1.0) == {'floor': 3}
    assert broker.get_broadcast_pipe().get_nowait() == {
        'topic': 'gcs/hall_call_assignment',
        'message': {'floor': 3},
    }


def test_get_times_out_on_empty_topic(broker):
    with pytest.raises(queue.Empty):
        broker.get('elevator/Elevator_0/status', timeout=0.01)


def test_full_pipe_drops_oldest():
    broker = MessageBroker(verbose=False, pipe_limit=2)
    for n in range(3):
        broker.put('topic', n)

    assert broker.get('topic', timeout=1.0) == 1
    assert broker.get('topic', timeout=1.0) == 2


def test_verbose_publish_is_echoed(capsys):
    broker = MessageBroker(verbose=True)
    broker.put('topic', 'hello')
    assert "[Broker] Publish on 'topic': hello" in capsys.readouterr().out


def test_clock_is_monotonic(broker):
    first = broker.get_current_time()
    assert first >= 0
    assert broker.get_current_time() >= first
