import httpx
import pytest
import respx

from hyfetcher.cli import USER_AGENT, main, run


def _make_data(tmp_path):
    data = tmp_path / "data"
    (data / "blog").mkdir(parents=True)
    (data / "blog" / "list.csv").write_text(
        "url,title\nhttps://example.com/a,Alpha\nhttps://example.com/b,Beta\n",
        encoding="utf-8",
    )
    return data


@pytest.mark.asyncio
async def test_run_downloads_and_indexes(tmp_path):
    data = _make_data(tmp_path)
    out = tmp_path / "out"
    with respx.mock(assert_all_called=False) as mock:
        route_a = mock.get("https://example.com/a").mock(
            return_value=httpx.Response(200, text="<p>alpha page</p>")
        )
        mock.get("https://example.com/b").mock(
            return_value=httpx.Response(200, text="<p>beta page</p>")
        )
        index_path = await run(data, out, 2)

    assert index_path == out / "index.html"
    assert route_a.calls.last.request.headers["user-agent"] == USER_AGENT
    assert (out / "blog" / "list" / "Alpha.html").read_text(encoding="utf-8") == (
        "<p>alpha page</p>"
    )
    index = index_path.read_text(encoding="utf-8")
    assert 'href="blog/list/Alpha.html"' in index
    assert 'href="blog/list/Beta.html"' in index


@pytest.mark.asyncio
async def test_run_reports_failed_post_and_continues(tmp_path, capsys):
    data = _make_data(tmp_path)
    out = tmp_path / "out"
    with respx.mock(assert_all_called=False) as mock:
        mock.get("https://example.com/a").mock(side_effect=httpx.ConnectError("down"))
        mock.get("https://example.com/b").mock(
            return_value=httpx.Response(200, text="<p>beta</p>")
        )
        index_path = await run(data, out, 1)

    assert "Error downloading" in capsys.readouterr().err
    assert not (out / "blog" / "list" / "Alpha.html").exists()
    assert (out / "blog" / "list" / "Beta.html").exists()
    assert "Alpha" in index_path.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_run_rejects_zero_concurrency(tmp_path):
    with pytest.raises(ValueError):
        await run(tmp_path, tmp_path, 0)


def test_main_runs_end_to_end(tmp_path, capsys):
    data = _make_data(tmp_path)
    out = tmp_path / "out"
    with respx.mock(assert_all_called=False) as mock:
        mock.get("https://example.com/a").mock(return_value=httpx.Response(200, text="a"))
        mock.get("https://example.com/b").mock(return_value=httpx.Response(200, text="b"))
        code = main(["-d", str(data), "-o", str(out), "-c", "3"])
    assert code == 0
    assert (out / "index.html").exists()
    assert "Found 2 posts." in capsys.readouterr().out


def test_main_fails_without_output_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    code = main(["-d", str(empty), "-o", str(tmp_path / "missing")])
    assert code == 1


def test_main_rejects_bad_concurrency(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["-d", str(tmp_path), "-c", "0"])
    assert info.value.code == 2