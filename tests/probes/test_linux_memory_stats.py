import pytest

from memprobe.internal import paths
from memprobe.kernel.errors import IOFailure, ResourceNotFound
from memprobe.probes.linux import LinuxMemoryStats

SAMPLE_MEMINFO = [
    "MemTotal:       16302132 kB",
    "MemFree:         1143460 kB",
    "MemAvailable:     123456 kB",
    "Buffers:          404520 kB",
    "Cached:          6710248 kB",
]


def test_default_path_is_proc_meminfo():
    assert LinuxMemoryStats().meminfo_path == paths.PROC_MEMINFO


def test_label():
    assert LinuxMemoryStats().name() == "Available memory"


def test_mem_available_in_kb_is_returned_in_bytes(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file(*SAMPLE_MEMINFO))
    assert probe.stat() == 123456 * 1024


def test_mem_available_without_unit_is_left_as_is(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("MemTotal: 1000", "MemAvailable:    123456"))
    assert probe.stat() == 123456


def test_unknown_unit_is_not_multiplied(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("MemAvailable:    123456 MB"))
    assert probe.stat() == 123456


def test_leading_whitespace_is_ignored(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("   MemAvailable:  10 kB"))
    assert probe.stat() == 10240


def test_missing_line_returns_not_detected(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("MemTotal:       16302132 kB", "MemFree: 1 kB"))
    assert probe.stat() is None
    assert probe.describe() == "Available memory: Not detected"


@pytest.mark.parametrize("line", [
    "MemAvailable",             # no colon, different key
    "MemAvailable:",            # key without a value
    "XMemAvailable: 5 kB",
    "memavailable: 5 kB",
])
def test_only_exact_key_with_a_value_matches(meminfo_file, line):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file(line))
    assert probe.stat() is None


def test_first_matching_line_wins(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("MemAvailable: 1 kB", "MemAvailable: 2 kB"))
    assert probe.stat() == 1024


def test_unparseable_value_is_not_detected_and_warns(meminfo_file, mocker):
    mock_logger = mocker.patch("memprobe.probes.linux.logger")
    probe = LinuxMemoryStats(meminfo_path=meminfo_file("MemAvailable:    12x456 kB"))

    assert probe.stat() is None
    mock_logger.warning.assert_called_once()
    assert mock_logger.warning.call_args.kwargs["value"] == "12x456"


def test_missing_file_raises_resource_not_found(tmp_path):
    probe = LinuxMemoryStats(meminfo_path=tmp_path / "does-not-exist")
    with pytest.raises(ResourceNotFound, match="not found"):
        probe.stat()


def test_unreadable_file_raises_io_failure_with_cause(tmp_path):
    # A directory exists but cannot be read as a file
    probe = LinuxMemoryStats(meminfo_path=tmp_path)
    with pytest.raises(IOFailure, match="Error reading file") as excinfo:
        probe.stat()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_error_raises_io_failure(meminfo_file, mocker):
    path = meminfo_file(*SAMPLE_MEMINFO)
    mocker.patch("pathlib.Path.read_text", side_effect=PermissionError(13, "Permission denied"))
    with pytest.raises(IOFailure) as excinfo:
        LinuxMemoryStats(meminfo_path=path).stat()
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_describe_renders_bytes(meminfo_file):
    probe = LinuxMemoryStats(meminfo_path=meminfo_file(*SAMPLE_MEMINFO))
    assert probe.describe() == f"Available memory: {123456 * 1024}"


@pytest.mark.parametrize("value", ["-5", "+5", "1_000", "１２３", "12.5"])
def test_signed_or_non_ascii_digit_values_are_not_detected(meminfo_file, mocker, value):
    mock_logger = mocker.patch("memprobe.probes.linux.logger")
    probe = LinuxMemoryStats(meminfo_path=meminfo_file(f"MemAvailable:    {value} kB"))

    assert probe.stat() is None
    assert mock_logger.warning.call_args.kwargs["value"] == value


def test_undecodable_file_raises_io_failure(tmp_path):
    path = tmp_path / "meminfo"
    path.write_bytes(b"MemTotal: 1 kB\nBad: \xff\xfe\nMemAvailable: 5 kB\n")

    with pytest.raises(IOFailure, match="Error reading file") as excinfo:
        LinuxMemoryStats(meminfo_path=path).stat()
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
