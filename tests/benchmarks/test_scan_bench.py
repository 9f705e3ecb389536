import pytest

from dsar_detect.scanner import run_all_detectors


@pytest.mark.bench
def test_scan_throughput(benchmark):
    text = "\n".join(
        ["jane@example.com DE89370400440532013000 4111111111111111 patient Kirchensteuer"] * 100
    )
    benchmark(lambda: run_all_detectors(text))
