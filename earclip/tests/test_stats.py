from earclip.core.stats import EarClipStats, format_stats_table


def test_to_dict_rates():
    s = EarClipStats(vertices=6, ears_removed=4, ear_tests=10, reflex_checks=5)
    d = s.to_dict()
    assert d['reflex_checks_per_test'] == 0.5
    assert EarClipStats().to_dict()['reflex_checks_per_test'] == 0.0


def test_format_stats_table():
    table = format_stats_table(EarClipStats(vertices=6, ears_removed=4, time_total=0.002).to_dict())
    lines = table.splitlines()
    assert lines[0].split() == ['stat', 'value']
    assert any(line.split() == ['ears_removed', '4'] for line in lines)
    assert any(line.split() == ['time_ms', '2.000'] for line in lines)
    assert format_stats_table({}) == "<no stats>"
