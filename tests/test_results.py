import threading

from nightscan.storage.results import ResultSink


def test_sink_writes_one_line_per_id(tmp_path):
    path = tmp_path / 'result.txt'
    sink = ResultSink(path, capacity=2)
    sink.start()
    for scene_id in ['A', 'B', 'C']:
        sink.put(scene_id)
    sink.close()
    sink.join()

    assert path.read_text() == 'A\nB\nC\n'
    assert sink.written == 3


def test_sink_truncates_previous_results(tmp_path):
    path = tmp_path / 'result.txt'
    path.write_text('OLD\n')

    sink = ResultSink(path)
    sink.start()
    sink.close()
    sink.join()

    assert path.read_text() == ''


def test_sink_with_concurrent_producers(tmp_path):
    path = tmp_path / 'result.txt'
    sink = ResultSink(path, capacity=4)
    sink.start()

    def produce(prefix):
        for i in range(200):
            sink.put(f'{prefix}{i:04d}' * 8)

    producers = [threading.Thread(target=produce, args=(p,)) for p in 'WXYZ']
    for t in producers:
        t.start()
    for t in producers:
        t.join()
    sink.close()
    sink.join()

    lines = path.read_text().splitlines()
    assert len(lines) == 800
    assert len(set(lines)) == 800
    assert all(len(line) == 40 for line in lines)
