import pytest
import responses

from nightscan.models.scene import Outcome
from nightscan.pipeline import run_pipeline
from nightscan.storage.catalog import CatalogError

from conftest import scene_url


def register_mtl(scene_id, mtl):
    responses.get(f'{scene_url(scene_id)}{scene_id}_MTL.txt', body=mtl)


@responses.activate
def test_run_pipeline_concurrently(tmp_path, catalog_factory, row_factory, mtl_factory, worker_factory, download_root):
    night = [f'LC8N{i:03d}' for i in range(40)]
    day = [f'LC8D{i:03d}' for i in range(10)]
    for scene_id in night:
        register_mtl(scene_id, mtl_factory(-10.0))
        responses.get(f'{scene_url(scene_id)}{scene_id}_B10.TIF', body=b'band10')
    for scene_id in day:
        register_mtl(scene_id, mtl_factory(30.0))

    rows = [row_factory(scene_id=s) for s in night + day]
    rows.append(row_factory(scene_id='LC8BAD', level='L2'))
    rows.append(['short', 'row'])
    catalog = catalog_factory(rows)
    result = tmp_path / 'result.txt'

    summary = run_pipeline(catalog, result, worker_factory(bands=[10]), num_workers=6)

    lines = result.read_text().splitlines()
    assert sorted(lines) == sorted(night)
    assert summary.written == 40
    assert summary.count(Outcome.DONE) == 40
    assert summary.count(Outcome.DAYTIME) == 10
    assert summary.count(Outcome.INVALID) == 1
    assert summary.total == 51
    for scene_id in night:
        assert (download_root / scene_id / f'{scene_id}_B10.TIF').read_bytes() == b'band10'


@responses.activate
def test_run_pipeline_failed_scene_is_not_recorded(tmp_path, catalog_factory, row_factory, mtl_factory, worker_factory):
    register_mtl('LC8OK', mtl_factory(-1))
    register_mtl('LC8BROKEN', mtl_factory(-1))
    responses.get(f'{scene_url("LC8OK")}LC8OK_BQA.TIF', body=b'bqa')
    # no BQA registered for LC8BROKEN, so every attempt fails with ConnectionError
    catalog = catalog_factory([row_factory(scene_id='LC8OK'), row_factory(scene_id='LC8BROKEN')])
    result = tmp_path / 'result.txt'

    summary = run_pipeline(catalog, result, worker_factory(bqa=True, retries=2), num_workers=0)

    assert result.read_text() == 'LC8OK\n'
    assert summary.count(Outcome.FAILED) == 1


def test_run_pipeline_survives_unexpected_errors(tmp_path, catalog_factory, row_factory):
    class ExplodingWorker:
        def process(self, record):
            if record.identifier == 'BOOM':
                raise RuntimeError('unexpected')
            return Outcome.DONE

    catalog = catalog_factory([row_factory(scene_id='BOOM'), row_factory(scene_id='FINE')])
    result = tmp_path / 'result.txt'

    summary = run_pipeline(catalog, result, ExplodingWorker(), num_workers=1)

    assert result.read_text() == 'FINE\n'
    assert summary.count(Outcome.FAILED) == 1


def test_run_pipeline_missing_catalog(tmp_path, worker_factory):
    result = tmp_path / 'result.txt'
    with pytest.raises(CatalogError):
        run_pipeline(tmp_path / 'missing', result, worker_factory(), num_workers=2)
    assert not result.exists()


def test_run_pipeline_unwritable_result(tmp_path, catalog_factory, row_factory, worker_factory):
    catalog = catalog_factory([row_factory()])
    with pytest.raises(OSError):
        run_pipeline(catalog, tmp_path / 'no-such-dir' / 'result.txt', worker_factory(), num_workers=2)
