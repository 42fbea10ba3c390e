import pytest

from rotor_balance import ValidationError, build_solver_input, coerce_number, parse_form, parse_payload


@pytest.mark.parametrize(
    "raw, expected",
    [
        (3, 3.0),
        (2.5, 2.5),
        ("4.25", 4.25),
        (" 7 ", 7.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (True, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        ("-inf", 0.0),
        ([1], 0.0),
    ],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_coerce_number_logs_fallback(caplog):
    with caplog.at_level("DEBUG", logger="rotor_balance.parsing"):
        coerce_number("oops", field="run 2 phase")

    assert "run 2 phase" in caplog.text


def test_parse_payload_builds_runs_with_colors():
    solver_input = parse_payload(
        {
            "v0": 7,
            "runs": [
                {"r": 4, "theta": 0},
                {"r": "3.5", "theta": "120"},
                {"r": 5, "theta": 240},
            ],
        }
    )

    assert solver_input.base_amplitude == 7.0
    assert [(run.amplitude, run.phase_deg, run.color_id) for run in solver_input.runs] == [
        (4.0, 0.0, 1),
        (3.5, 120.0, 2),
        (5.0, 240.0, 3),
    ]


def test_parse_payload_missing_fields_become_zero():
    solver_input = parse_payload({"runs": [{}, {"r": "x"}, {"theta": None}]})

    assert solver_input.base_amplitude == 0.0
    assert all(run.amplitude == 0.0 and run.phase_deg == 0.0 for run in solver_input.runs)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "v0=7",
        {"v0": 7},
        {"v0": 7, "runs": "abc"},
        {"v0": 7, "runs": [{"r": 1, "theta": 0}] * 2},
        {"v0": 7, "runs": [{"r": 1, "theta": 0}] * 4},
        {"v0": 7, "runs": [1, 2, 3]},
    ],
)
def test_parse_payload_rejects_bad_structure(payload):
    with pytest.raises(ValidationError):
        parse_payload(payload)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError, match="exactly 3 runs"):
        build_solver_input(1.0, [])


def test_parse_form_reads_flat_fields():
    form = {
        "init-amp": "7",
        "t1-amp": "4",
        "t1-phase": "0",
        "t2-amp": "3.5",
        "t2-phase": "120",
        "t3-amp": "5",
        "t3-phase": "",
    }

    solver_input = parse_form(form)

    assert solver_input.base_amplitude == 7.0
    assert solver_input.runs[1].amplitude == 3.5
    assert solver_input.runs[2].phase_deg == 0.0
