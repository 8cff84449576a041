import logging
import os

ROOT_NAME = "popbits"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name=None):
	"""Return a logger living under the package namespace."""
	if not name:
		return logging.getLogger(ROOT_NAME)
	if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
		return logging.getLogger(name)
	return logging.getLogger(f"{ROOT_NAME}.{name}")


def init_logger(name=None, log_file_path=None, logging_level=logging.INFO):
	"""Attach a console handler (and optionally a file handler) to a logger.

	Calling this twice with the same name does not duplicate handlers.

	Args:
		name: logger name, relative to the package namespace
		log_file_path: if given, also write records to this file
		logging_level: level for the logger and its handlers
	"""
	logger = get_logger(name)
	logger.setLevel(logging_level)
	formatter = logging.Formatter(LOG_FORMAT)

	has_stream = any(type(h) is logging.StreamHandler for h in logger.handlers)
	if not has_stream:
		stream_handler = logging.StreamHandler()
		stream_handler.setFormatter(formatter)
		logger.addHandler(stream_handler)

	if log_file_path is not None:
		existing = [
			h for h in logger.handlers
			if isinstance(h, logging.FileHandler) and h.baseFilename == _abspath(log_file_path)
		]
		if not existing:
			file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
			file_handler.setFormatter(formatter)
			logger.addHandler(file_handler)

	for handler in logger.handlers:
		handler.setLevel(logging_level)
	return logger


def _abspath(path):
	return os.path.abspath(os.fspath(path))
