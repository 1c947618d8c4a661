"""Locust load script for the IMDb Top Picks addon.
Usage:
  IMDB_ADDON_SEGMENT="<segment>" locust -f perf/locustfile.py --host http://localhost:8000
"""
import os
from locust import HttpUser, task, between

SEGMENT = os.getenv("IMDB_ADDON_SEGMENT", "")
GENRE = os.getenv("IMDB_ADDON_GENRE", "Drama")


class StremioUser(HttpUser):
    wait_time = between(0.2, 1.0)

    def on_start(self):
        if not SEGMENT:
            raise RuntimeError("Set IMDB_ADDON_SEGMENT env var before running locust")

    @task(1)
    def manifest(self):
        self.client.get(f"/{SEGMENT}/manifest.json", name="manifest")

    @task(3)
    def catalog_movies(self):
        self.client.get(f"/{SEGMENT}/catalog/movie/imdb-top-picks.json", name="catalog_movie")

    @task(2)
    def catalog_series_by_genre(self):
        self.client.get(
            f"/{SEGMENT}/catalog/series/imdb-top-picks/genre={GENRE}.json",
            name="catalog_series_genre",
        )

    @task(1)
    def meta_stub(self):
        self.client.get(f"/{SEGMENT}/meta/movie/tt0137523.json", name="meta")
