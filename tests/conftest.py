import csv
import gzip
from pathlib import Path

import pytest

from nightscan.api.http import HttpClient
from nightscan.downloaders.worker import SceneWorker
from nightscan.sources.http import HttpSceneSource
from nightscan.storage.cache import FileCache

ROOT_URL = 'https://landsat.example.com/L8'

HEADER = [
    'entityId', 'acquisitionDate', 'cloudCover', 'processingLevel', 'path', 'row',
    'min_lat', 'min_lon', 'max_lat', 'max_lon', 'download_url',
]


def scene_url(scene_id: str) -> str:
    return f'{ROOT_URL}/{scene_id}/'


@pytest.fixture
def row_factory():
    def create_row(
            scene_id: str = 'LC80010022015001LGN00',
            acquired: str = '2015-01-01 15:49:11.236565',
            cloud_cover: str = '12.5',
            level: str = 'L1T',
    ) -> list[str]:
        return [
            scene_id, acquired, cloud_cover, level, '1', '2',
            '79.1', '-16.2', '81.8', '-3.9', f'{scene_url(scene_id)}index.html',
        ]

    return create_row


@pytest.fixture
def catalog_factory(tmp_path):
    def create_catalog(rows: list, name: str = 'scene_list', compress: bool = False) -> Path:
        path = tmp_path / name
        opener = gzip.open if compress else open
        with opener(path, 'wt', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(HEADER)
            writer.writerows(rows)
        return path

    return create_catalog


@pytest.fixture
def mtl_factory():
    def create_mtl(sun_elevation: float | str | None) -> bytes:
        lines = [
            'GROUP = L1_METADATA_FILE',
            '  GROUP = IMAGE_ATTRIBUTES',
            '    CLOUD_COVER = 12.50',
        ]
        if sun_elevation is not None:
            lines.append(f'    SUN_ELEVATION = {sun_elevation}')
        lines += ['    EARTH_SUN_DISTANCE = 0.9833018', '  END_GROUP = IMAGE_ATTRIBUTES', 'END_GROUP = L1_METADATA_FILE']
        return ('\n'.join(lines) + '\n').encode()

    return create_mtl


@pytest.fixture
def cache_root(tmp_path):
    return tmp_path / 'cache'


@pytest.fixture
def download_root(tmp_path):
    return tmp_path / 'download'


@pytest.fixture
def source(cache_root):
    return HttpSceneSource(
        FileCache(HttpClient(timeout=5), chunk_size=1024),
        cache_root=cache_root,
        cache_metadata=True,
        cache_bands=False,
    )


@pytest.fixture
def worker_factory(source, download_root):
    def create_worker(**kwargs) -> SceneWorker:
        kwargs.setdefault('download_root', download_root)
        kwargs.setdefault('retries', 3)
        kwargs.setdefault('retry_wait', 0)
        return SceneWorker(source, **kwargs)

    return create_worker
