from katas.logs import LogLevel, debug, error, info, log, warn


def test_emits_info():
    assert info("Timezone changed") == "[INFO]: Timezone changed"


def test_emits_warning():
    assert warn("Timezone not set") == "[WARNING]: Timezone not set"


def test_emits_error():
    assert error("Disk full") == "[ERROR]: Disk full"


def test_emits_debug():
    assert debug("reached line 123") == "[DEBUG]: reached line 123"


def test_log_emits_info():
    assert log(LogLevel.INFO, "Timezone changed") == "[INFO]: Timezone changed"


def test_log_emits_warning():
    assert log(LogLevel.WARNING, "Timezone not set") == "[WARNING]: Timezone not set"


def test_log_emits_error():
    assert log(LogLevel.ERROR, "Disk full") == "[ERROR]: Disk full"


def test_log_emits_debug():
    assert log(LogLevel.DEBUG, "reached line 123") == "[DEBUG]: reached line 123"