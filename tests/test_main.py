from main import run


def test_demo_walkthrough_ends_rested():
    hp = run()
    assert hp.value() == 20
    # last committed mod clamped the ~9 HP left down to 0
    assert 0 < hp.get("proxy_value_previous") < 10
