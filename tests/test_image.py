import httpx
import pytest
import respx

from hyfetcher.image import process_images


@pytest.mark.asyncio
async def test_absolute_image_saved_and_rewritten(tmp_path):
    html = '<html><body><img src="https://cdn.example.com/a.png"></body></html>'
    with respx.mock(assert_all_called=False) as mock:
        mock.get("https://cdn.example.com/a.png").mock(
            return_value=httpx.Response(200, content=b"PNGDATA")
        )
        async with httpx.AsyncClient() as client:
            result = await process_images(html, "https://example.com/p", tmp_path, client)
    assert 'src="images/a.png"' in result
    assert "cdn.example.com" not in result
    assert (tmp_path / "images" / "a.png").read_bytes() == b"PNGDATA"


@pytest.mark.asyncio
async def test_relative_image_resolved_against_page(tmp_path):
    html = '<p><img src="pics/b.gif" alt="b"></p>'
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get("https://example.com/posts/pics/b.gif").mock(
            return_value=httpx.Response(200, content=b"GIF")
        )
        async with httpx.AsyncClient() as client:
            result = await process_images(
                html, "https://example.com/posts/one", tmp_path, client
            )
    assert route.called
    assert result == '<p><img src="images/b.gif" alt="b"></p>'


@pytest.mark.asyncio
async def test_relative_image_without_valid_page_url_untouched(tmp_path):
    html = '<img src="pics/b.gif">'
    async with httpx.AsyncClient() as client:
        result = await process_images(html, "not a url", tmp_path, client)
    assert result == html
    assert not (tmp_path / "images").exists()


@pytest.mark.asyncio
async def test_image_without_src_untouched(tmp_path):
    html = '<img alt="nothing">'
    async with httpx.AsyncClient() as client:
        result = await process_images(html, "https://example.com/", tmp_path, client)
    assert result == html


@pytest.mark.asyncio
async def test_failed_download_still_rewrites(tmp_path):
    html = '<img src="https://cdn.example.com/gone.png">'
    with respx.mock(assert_all_called=False) as mock:
        mock.get("https://cdn.example.com/gone.png").mock(return_value=httpx.Response(404))
        async with httpx.AsyncClient() as client:
            result = await process_images(html, "https://example.com/", tmp_path, client)
    assert 'src="images/gone.png"' in result
    assert not (tmp_path / "images" / "gone.png").exists()


@pytest.mark.asyncio
async def test_existing_image_not_fetched_again(tmp_path):
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "a.png").write_bytes(b"cached")
    html = '<img src="https://cdn.example.com/a.png">'
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get("https://cdn.example.com/a.png").mock(
            return_value=httpx.Response(200, content=b"fresh")
        )
        async with httpx.AsyncClient() as client:
            result = await process_images(html, "https://example.com/", tmp_path, client)
    assert not route.called
    assert 'src="images/a.png"' in result
    assert (tmp_path / "images" / "a.png").read_bytes() == b"cached"