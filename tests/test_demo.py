import pytest

import elgamal_he.demo as demo


@pytest.mark.anyio
async def test_demo_checks_pass(modp_key):
    results = await demo.run_demo(key=modp_key)
    assert [r["check"] for r in results] == ["toy_key", "text_roundtrip", "homomorphic_product"]
    assert all(r["passed"] for r in results)


def test_main_exit_code(monkeypatch, capsys):
    async def fake_run_demo():
        return [{"check": "toy_key", "passed": True}, {"check": "text_roundtrip", "passed": False}]

    monkeypatch.setattr(demo, "run_demo", fake_run_demo)
    with pytest.raises(SystemExit) as exc:
        demo.main()
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "[FAIL] text_roundtrip" in out
    assert "1/2 checks passed" in out
