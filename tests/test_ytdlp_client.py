#!/usr/bin/env python3
"""
Unit tests for the yt-dlp video source (yt_dlp.YoutubeDL is mocked).
"""
import unittest
from unittest.mock import MagicMock, patch

from extraction_pipeline.core.youtube import DetailFetchFailure, SearchFailure, YtDlpClient


def _mock_ydl(mock_cls, info=None, error=None):
    ydl = MagicMock()
    if error is not None:
        ydl.extract_info.side_effect = error
    else:
        ydl.extract_info.return_value = info
    mock_cls.return_value.__enter__.return_value = ydl
    return ydl


class TestYtDlpSearch(unittest.TestCase):

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_keyword_search(self, mock_cls):
        ydl = _mock_ydl(mock_cls, {"entries": [
            {"id": "aaaaaaaaaaa", "url": "https://www.youtube.com/watch?v=aaaaaaaaaaa", "title": "A"},
            {"id": "bbbbbbbbbbb", "url": "bbbbbbbbbbb", "title": "B"},
            None,
            {"title": "no id"},
        ]})

        hits = YtDlpClient().search("cooking videos", 10)

        ydl.extract_info.assert_called_once_with("ytsearch10:cooking videos", download=False)
        self.assertEqual([h.video_id for h in hits], ["aaaaaaaaaaa", "bbbbbbbbbbb"])
        self.assertEqual(hits[1].url, "https://www.youtube.com/watch?v=bbbbbbbbbbb")
        opts = mock_cls.call_args[0][0]
        self.assertEqual(opts["extract_flat"], "in_playlist")
        self.assertEqual(opts["playlistend"], 10)

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_channel_queries_list_uploads(self, mock_cls):
        ydl = _mock_ydl(mock_cls, {"entries": []})
        client = YtDlpClient()
        cases = {
            "@MrBeast": "https://www.youtube.com/@MrBeast/videos",
            "UCX6OQ3DkcsbYNE6H8uQQuVA": "https://www.youtube.com/channel/UCX6OQ3DkcsbYNE6H8uQQuVA/videos",
            "https://www.youtube.com/@MrBeast/shorts": "https://www.youtube.com/@MrBeast/videos",
        }
        for query, expected in cases.items():
            with self.subTest(query=query):
                client.search(query, 5)
                self.assertEqual(ydl.extract_info.call_args[0][0], expected)

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_search_limit_applied(self, mock_cls):
        _mock_ydl(mock_cls, {"entries": [{"id": f"id{i:09d}"} for i in range(8)]})
        self.assertEqual(len(YtDlpClient().search("@chan", 3)), 3)

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_search_error(self, mock_cls):
        _mock_ydl(mock_cls, error=Exception("HTTP Error 429"))
        with self.assertRaises(SearchFailure):
            YtDlpClient().search("@chan", 3)


class TestYtDlpDetails(unittest.TestCase):

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_detail_mapping(self, mock_cls):
        _mock_ydl(mock_cls, {
            "id": "abc",
            "title": "Title",
            "description": "",
            "duration": 212,
            "view_count": 1000,
            "upload_date": "20240115",
            "thumbnails": [{"url": "https://i.ytimg.com/1.jpg"}, {"id": "no-url"}],
            "channel": "Chan",
            "channel_url": "https://www.youtube.com/channel/UC1",
            "tags": ["a", "b"],
            "categories": ["Gaming"],
        })

        details = YtDlpClient().get_details("https://www.youtube.com/watch?v=abc")

        self.assertEqual(details["length_seconds"], 212)
        self.assertEqual(details["view_count"], 1000)
        self.assertEqual(details["publish_date"], "2024-01-15")
        self.assertEqual(details["thumbnails"], [{"url": "https://i.ytimg.com/1.jpg"}])
        self.assertEqual(details["author"], {"name": "Chan", "channel_url": "https://www.youtube.com/channel/UC1"})
        self.assertEqual(details["keywords"], ["a", "b"])
        self.assertEqual(details["category"], "Gaming")

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_missing_optional_fields(self, mock_cls):
        _mock_ydl(mock_cls, {"id": "abc", "title": "T", "duration": 5, "view_count": 1,
                             "uploader": "Up", "uploader_url": "https://u"})
        details = YtDlpClient().get_details("https://www.youtube.com/watch?v=abc")

        self.assertIsNone(details["category"])
        self.assertIsNone(details["publish_date"])
        self.assertEqual(details["keywords"], [])
        self.assertEqual(details["author"]["name"], "Up")

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_detail_error(self, mock_cls):
        _mock_ydl(mock_cls, error=Exception("Video unavailable"))
        with self.assertRaises(DetailFetchFailure):
            YtDlpClient().get_details("https://www.youtube.com/watch?v=abc")

    @patch("extraction_pipeline.core.youtube.ytdlp_client.yt_dlp.YoutubeDL")
    def test_empty_info(self, mock_cls):
        _mock_ydl(mock_cls, None)
        with self.assertRaises(DetailFetchFailure):
            YtDlpClient().get_details("https://www.youtube.com/watch?v=abc")


if __name__ == '__main__':
    unittest.main()
