# interfaces/serial_haptics.py

import logging
import queue
import threading
import time

import serial

from lingotouch.errors import HapticFeedbackError
from lingotouch.interfaces.interface import DEFAULT_VIBRATION_PATTERN, HapticFeedback

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    A thread-safe implementation of Singleton.
    """
    _instances = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class SerialHapticFeedback(HapticFeedback, metaclass=SingletonMeta):
    """
    Vibration motor driven by an Arduino over a serial line.
    Each pulse is sent as 'VIBRATE:<ms>'; pauses are waited out on the worker thread.
    """

    def __init__(self, port, baudrate=9600, timeout=5):
        self.vibration_queue = queue.Queue(maxsize=10)
        self.serial_lock = threading.Lock()

        try:
            self.serial_port = serial.Serial(port, baudrate, timeout=timeout)
            logger.info(f"Connected to vibration motor on port {port} at {baudrate} baud.")
            time.sleep(2)  # Arduino resets when the port opens

            self.vibration_thread = threading.Thread(target=self._process_vibration_commands, daemon=True)
            self.vibration_thread.start()
        except serial.SerialException as e:
            logger.error(f"Failed to connect to vibration motor on port {port}: {e}")
            self.serial_port = None

    @property
    def available(self):
        return bool(self.serial_port and self.serial_port.is_open)

    def _process_vibration_commands(self):
        while True:
            pattern = self.vibration_queue.get()
            try:
                self._play_pattern(pattern)
            except Exception as e:
                logger.error(f"Error processing vibration pattern {pattern}: {e}")
            finally:
                self.vibration_queue.task_done()

    def _play_pattern(self, pattern):
        for index, duration in enumerate(pattern):
            if index % 2 == 0:
                self._send_vibrate_command(duration)
            # The motor call returns immediately, so wait out pulses as well as pauses.
            time.sleep(duration / 1000.0)

    def _send_vibrate_command(self, duration):
        command_str = f"VIBRATE:{duration}\n"
        with self.serial_lock:
            self.serial_port.write(command_str.encode())
        logger.debug(f"Sent VIBRATE command via serial: {command_str.strip()}")

    def vibrate(self, pattern=DEFAULT_VIBRATION_PATTERN):
        pattern = tuple(pattern)
        if not all(isinstance(duration, int) and duration >= 0 for duration in pattern):
            raise HapticFeedbackError(f"Vibration pattern must be non-negative milliseconds: {list(pattern)}")
        if not self.available:
            logger.error("Serial port is not open. Cannot vibrate.")
            return False
        try:
            self.vibration_queue.put(pattern, block=False)
            logger.debug(f"Queued vibration pattern {list(pattern)}")
            return True
        except queue.Full:
            logger.warning(f"Vibration queue is full. Discarding pattern {list(pattern)}")
            return False
