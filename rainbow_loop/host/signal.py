"""Minimal event primitive: callbacks connect to a signal and get a handle
back that disconnects them again."""


class Connection:
    def __init__(self, signal, callback):
        self._signal = signal
        self._callback = callback

    @property
    def connected(self):
        return self._signal is not None

    def disconnect(self):
        """Remove the callback from its signal. Safe to call more than once."""
        if self._signal is None:
            return
        self._signal._remove(self)
        self._signal = None

    def _invoke(self, *args):
        self._callback(*args)


class Signal:
    def __init__(self, name='Signal'):
        self.name = name
        self._connections = []

    def connect(self, callback):
        if not callable(callback):
            raise TypeError(f"{self.name}: callback must be callable, got {type(callback).__name__}")
        connection = Connection(self, callback)
        self._connections.append(connection)
        return connection

    def fire(self, *args):
        # Iterate over a snapshot; callbacks may disconnect while firing
        for connection in list(self._connections):
            if connection.connected:
                connection._invoke(*args)

    def disconnect_all(self):
        for connection in list(self._connections):
            connection.disconnect()

    def _remove(self, connection):
        self._connections.remove(connection)

    def __len__(self):
        return len(self._connections)

    def __repr__(self):
        return f"Signal({self.name!r}, connections={len(self._connections)})"
