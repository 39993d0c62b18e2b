from kiters.bench import main, run_benchmarks

EXPECTED_CASES = {
    "request_id/encode_plain",
    "request_id/encode_mixed",
    "request_id/encode_wide",
    "request_id/encode_mixed_wide",
    "request_id/generator_next_id",
    "request_id/generator_mixed",
    "request_id/generator_to_string",
    "request_id/generator_wide",
    "request_id/generator_mixed_wide",
    "request_id/generator_wide_to_string",
    "request_id/as_str",
    "eid/new_to_string",
    "timestamp/get_utc_timestamp",
}


def test_run_benchmarks_covers_all_cases():
    results = run_benchmarks(number=10)
    assert set(results) == EXPECTED_CASES
    assert all(ns > 0 for ns in results.values())


def test_main_prints_one_line_per_case(capsys):
    main(["--number", "5"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == len(EXPECTED_CASES)
    assert all(line.endswith("ns/call") for line in lines)
