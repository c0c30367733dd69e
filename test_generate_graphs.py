import matplotlib

matplotlib.use('Agg')

from generate_graphs import collect_results, main, plot_results  # noqa: E402


def write_trace(tmp_path, name, body):
    path = tmp_path / name
    path.write_text(body)
    return str(path)


def test_collect_results(tmp_path):
    trace = write_trace(tmp_path, 'abcab.txt', "16 2 4 4\nr00\nw10\nr20\nr00\nr10\n")
    results = collect_results([trace])

    assert list(results[trace]) == ['FIFO', 'LRU', 'OPTIMAL']
    assert results[trace]['OPTIMAL'] == {
        'misses': 4, 'evictions': 2, 'swap_writes': 1, 'swap_recoveries': 1,
    }
    assert results[trace]['FIFO']['misses'] == 5


def test_plot_results(tmp_path):
    first = write_trace(tmp_path, 'one.txt', "16 2 4 4\nr00\nw10\nr20\n")
    second = write_trace(tmp_path, 'two.txt', "16 1 4 4\nw00\nr10\nr00\n")
    output = str(tmp_path / 'comparison.png')

    assert plot_results(collect_results([first, second]), output) == output
    assert (tmp_path / 'comparison.png').stat().st_size > 0


def test_main(tmp_path, monkeypatch, capsys):
    trace = write_trace(tmp_path, 'trace.txt', "16 2 4 4\nr00\nw10\nr20\n")
    monkeypatch.chdir(tmp_path)
    main([trace])

    out = capsys.readouterr().out
    assert "OPTIMAL" in out
    assert (tmp_path / 'algorithm_comparison.png').exists()
