import socket
import threading
import time

import pytest

from filekit.transfer import receive_into, send_file, serve


def _free_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_receive_into_writes_all_data(tmp_path):
    left, right = socket.socketpair()
    payload = bytes(range(256)) * 10
    left.sendall(payload)
    left.close()
    out = tmp_path / "tsmkv.mkv"
    with right:
        count = receive_into(right, out)
    assert count == len(payload)
    assert out.read_bytes() == payload


def test_receive_into_rejects_bad_chunk(tmp_path):
    left, right = socket.socketpair()
    with left, right:
        with pytest.raises(ValueError):
            receive_into(right, tmp_path / "x", 0)


def test_send_file_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        send_file(tmp_path / "hi.txt", "127.0.0.1", _free_port())


def test_send_file_rejects_bad_chunk(tmp_path):
    path = tmp_path / "a"
    path.write_bytes(b"a")
    with pytest.raises(ValueError):
        send_file(path, "127.0.0.1", _free_port(), -1)


def test_send_and_serve_round_trip(tmp_path):
    payload = bytes(range(256)) * 20
    source = tmp_path / "upload.bin"
    source.write_bytes(payload)
    target = tmp_path / "received.bin"
    port = _free_port()
    server = threading.Thread(target=serve, args=("127.0.0.1", port, target, 1))
    server.start()

    sent = None
    deadline = time.monotonic() + 10
    while sent is None and time.monotonic() < deadline:
        try:
            sent = send_file(source, "127.0.0.1", port)
        except ConnectionRefusedError:
            time.sleep(0.05)
    server.join(timeout=10)

    assert sent == len(payload)
    assert not server.is_alive()
    assert target.read_bytes() == payload