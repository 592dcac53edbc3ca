"""Sending a file over TCP and receiving uploads into a file."""

from __future__ import annotations

import logging
import os
import socket
import threading

log = logging.getLogger(__name__)

CLIENT_CHUNK_SIZE = 1024
SERVER_CHUNK_SIZE = 512


def _check_chunk(chunk_size: int) -> None:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")


def send_file(
    path: str | os.PathLike, host: str, port: int, chunk_size: int = CLIENT_CHUNK_SIZE
) -> int:
    """Stream the file at ``path`` to ``host:port`` in chunks; return the bytes sent."""
    _check_chunk(chunk_size)
    sent = 0
    with open(path, "rb") as handle, socket.create_connection((host, port)) as conn:
        log.info("Connected to %s:%s, sending %s", host, port, path)
        while chunk := handle.read(chunk_size):
            conn.sendall(chunk)
            sent += len(chunk)
    log.info("File sent successfully (%d bytes)", sent)
    return sent


def receive_into(
    conn: socket.socket, path: str | os.PathLike, chunk_size: int = SERVER_CHUNK_SIZE
) -> int:
    """Write everything read from ``conn`` until the peer closes into ``path``; return the bytes."""
    _check_chunk(chunk_size)
    received = 0
    with open(path, "wb") as handle:
        while data := conn.recv(chunk_size):
            handle.write(data)
            received += len(data)
    return received


def _handle_client(conn: socket.socket, address, path) -> None:
    with conn:
        log.info("Receiving file from %s", address)
        try:
            count = receive_into(conn, path)
        except OSError as exc:
            log.error("Failed while receiving from %s: %s", address, exc)
        else:
            log.info("Finished receiving file from %s (%d bytes)", address, count)


def serve(
    host: str, port: int, path: str | os.PathLike, max_clients: int | None = None
) -> None:
    """Accept uploads on ``host:port``, each written to ``path`` by its own thread.

    Runs forever unless ``max_clients`` is given, in which case it returns once that
    many connections have been accepted and fully handled.
    """
    workers: list[threading.Thread] = []
    with socket.create_server((host, port)) as listener:
        log.info("Listening on %s:%s", host, port)
        accepted = 0
        while max_clients is None or accepted < max_clients:
            try:
                conn, address = listener.accept()
            except OSError as exc:
                log.error("Connection failed: %s", exc)
                continue
            accepted += 1
            log.info("New client connected")
            worker = threading.Thread(
                target=_handle_client, args=(conn, address, path), daemon=True
            )
            worker.start()
            workers.append(worker)
    for worker in workers:
        worker.join()