"""
Tests for the Printing Framework
"""

import asyncio
import base64
import os
from unittest import IsolatedAsyncioTestCase, TestCase, skipUnless
from unittest.mock import AsyncMock, MagicMock, patch

from bizdocs.config import BrowserSettings
from bizdocs.exceptions import BrowserRenderError, RenderError
from bizdocs.geometry import resolve_config
from bizdocs.printing import IPdfRenderer, PdfRenderService, RenderOptions, RenderResult
from bizdocs.printing.compositor import compose_document, page_size_directive
from bizdocs.printing.dto import build_result
from bizdocs.printing.pagecount import estimate_page_count
from bizdocs.printing.playwright_renderer import PlaywrightRenderer, pdf_margins
from bizdocs.printing.sanitizer import sanitize_html


ONE_PAGE_PDF = b'%PDF-1.4\n1 0 obj << /Type /Pages /Kids [2 0 R] >>\n2 0 obj << /Type /Page /Parent 1 0 R >>\n%%EOF'


class FakeRenderer(IPdfRenderer):
    """Renderer that records its input and returns canned bytes"""

    def __init__(self, pdf_bytes=ONE_PAGE_PDF):
        self.pdf_bytes = pdf_bytes
        self.calls = []

    async def render_html_to_pdf(self, html, config):
        self.calls.append((html, config))
        return self.pdf_bytes


def mock_playwright(pdf_bytes=ONE_PAGE_PDF):
    """Build a mocked async_playwright() context manager with page and browser"""
    handle = MagicMock()
    handle.dispose = AsyncMock()

    page = MagicMock()
    page.set_content = AsyncMock()
    page.evaluate_handle = AsyncMock(return_value=handle)
    page.pdf = AsyncMock(return_value=pdf_bytes)

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)
    return manager, playwright, browser, page


class PageCountTestCase(TestCase):
    """Test cases for estimate_page_count()"""

    def test_counts_page_markers(self):
        """Test that three page objects count as three pages"""
        pdf = (
            b'%PDF-1.4 1 0 obj << /Type /Pages /Count 3 >> '
            b'2 0 obj << /Type /Page /Parent 1 0 R >> '
            b'3 0 obj << /Type/Page /Parent 1 0 R >> '
            b'4 0 obj << /Parent 1 0 R /Type /Page\n>>'
        )
        self.assertEqual(estimate_page_count(pdf), 3)

    def test_no_markers_falls_back_to_one(self):
        """Test that a stream without markers counts as one page"""
        self.assertEqual(estimate_page_count(b''), 1)
        self.assertEqual(estimate_page_count(b'%PDF-1.7 compressed object streams'), 1)

    def test_pages_node_is_not_counted(self):
        """Test that the /Pages tree node is excluded"""
        self.assertEqual(estimate_page_count(b'<< /Type /Pages >> << /Type /Pages >>'), 1)

    def test_non_ascii_bytes(self):
        """Test that binary content does not break the scan"""
        pdf = b'\xff\xfe\x00 << /Type /Page >> \x80\x81 << /Type /Page >>'
        self.assertEqual(estimate_page_count(pdf), 2)


class CompositorTestCase(TestCase):
    """Test cases for the HTML compositor"""

    def test_document_carries_palette_and_fonts(self):
        """Test that CSS variables are derived from the configuration"""
        config = resolve_config({
            'colors': {'primary': '#10b981', 'text': '#111111', 'text_light': '#777777',
                       'border': '#dddddd', 'background': '#fafafa'},
            'fonts': {'heading': 'Georgia', 'body': 'Arial', 'mono': 'Menlo'},
        })
        html = compose_document('<p>Body</p>', config)

        self.assertIn('--color-primary: #10b981', html)
        self.assertIn('--color-background: #fafafa', html)
        self.assertIn('--font-heading: Georgia', html)
        self.assertIn('--font-mono: Menlo', html)
        self.assertIn('print-color-adjust: exact', html)

    def test_page_rule(self):
        """Test the @page size and zero margin"""
        html = compose_document('', resolve_config({'page_size': 'a4'}))

        self.assertIn('size: a4;', html)
        self.assertIn('margin: 0;', html)

    def test_landscape_page_rule(self):
        """Test the @page size for landscape pages"""
        config = resolve_config({'page_size': 'legal', 'orientation': 'landscape'})
        self.assertEqual(page_size_directive(config), 'legal landscape')
        self.assertIn('size: legal landscape;', compose_document('', config))

    def test_fragment_is_embedded_verbatim(self):
        """Test that the fragment is not escaped"""
        fragment = '<div class="invoice"><h1>INVOICE</h1></div>'
        html = compose_document(fragment, resolve_config())
        self.assertIn(fragment, html)

    def test_title_is_escaped(self):
        """Test that the document title is escaped"""
        html = compose_document('', resolve_config(), title='A & B <Co>')
        self.assertIn('<title>A &amp; B &lt;Co&gt;</title>', html)


class SanitizerTestCase(TestCase):
    """Test cases for the HTML sanitizer"""

    def test_script_tags_removed(self):
        """Test that script tags are stripped"""
        clean = sanitize_html('<p>Hello</p><script>alert(1)</script>')

        self.assertNotIn('<script', clean)
        self.assertIn('<p>Hello</p>', clean)

    def test_event_handlers_removed(self):
        """Test that event handler attributes are dropped"""
        clean = sanitize_html('<img src="logo.png" onerror="alert(1)">')

        self.assertNotIn('onerror', clean)
        self.assertIn('src="logo.png"', clean)

    def test_allowed_styles_kept(self):
        """Test that allowed inline styles survive"""
        clean = sanitize_html('<span style="color: red; position: fixed;">1</span>')

        self.assertIn('color: red', clean)
        self.assertNotIn('position', clean)

    def test_strict_mode_drops_styles(self):
        """Test that strict mode removes style attributes"""
        clean = sanitize_html('<p style="color: red;">Hi</p>', strict=True)
        self.assertEqual(clean, '<p>Hi</p>')

    def test_javascript_links_removed(self):
        """Test that javascript: URLs are dropped"""
        clean = sanitize_html('<a href="javascript:alert(1)">x</a>')
        self.assertNotIn('javascript:', clean)


class RenderResultTestCase(TestCase):
    """Test cases for output packaging"""

    def test_formats(self):
        """Test each in-memory representation"""
        buffer = build_result(b'%PDF', 2, RenderOptions(format='buffer'), default_format='blob', allow_save=True)
        blob = build_result(b'%PDF', 2, RenderOptions(format='blob'), default_format='buffer', allow_save=True)
        encoded = build_result(b'%PDF', 2, RenderOptions(format='base64'), default_format='blob', allow_save=True)

        self.assertEqual(buffer.buffer, b'%PDF')
        self.assertEqual(blob.blob.getvalue(), b'%PDF')
        self.assertEqual(encoded.base64, base64.b64encode(b'%PDF').decode('ascii'))
        for result in (buffer, blob, encoded):
            self.assertEqual(result.pdf_bytes, b'%PDF')
            self.assertEqual(len(result), 4)
            self.assertEqual(result.pages, 2)

    def test_default_format(self):
        """Test that the backend default applies without options"""
        result = build_result(b'%PDF', 1, None, default_format='blob', allow_save=True)
        self.assertIsNotNone(result.blob)
        self.assertIsNone(result.buffer)

    def test_save_unsupported_falls_back_to_buffer(self):
        """Test that 'save' becomes 'buffer' on backends without disk output"""
        with self.assertLogs('bizdocs.printing.dto', level='WARNING'):
            result = build_result(b'%PDF', 1, RenderOptions(format='save'), default_format='buffer', allow_save=False)

        self.assertEqual(result.buffer, b'%PDF')
        self.assertIsNone(result.filename)

    def test_unknown_format(self):
        """Test that an unknown format is rejected"""
        with self.assertRaises(ValueError):
            RenderOptions(format='docx')

    def test_empty_result(self):
        """Test a result without payload"""
        result = RenderResult(pages=1, filename='out.pdf')
        self.assertIsNone(result.pdf_bytes)
        self.assertEqual(len(result), 0)


class PlaywrightRendererTestCase(IsolatedAsyncioTestCase):
    """Test cases for PlaywrightRenderer with a mocked browser"""

    def setUp(self):
        self.settings = BrowserSettings(timeout_ms=5000)
        self.renderer = PlaywrightRenderer(settings=self.settings)
        self.config = resolve_config()

    async def test_render_success(self):
        """Test that a successful print returns the PDF bytes"""
        manager, playwright, browser, page = mock_playwright()

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            pdf_bytes = await self.renderer.render_html_to_pdf('<p>x</p>', self.config)

        self.assertEqual(pdf_bytes, ONE_PAGE_PDF)
        browser.close.assert_awaited_once()
        page.set_content.assert_awaited_once_with('<p>x</p>', wait_until='networkidle', timeout=5000)
        page.evaluate_handle.assert_awaited_once_with('document.fonts.ready')

    async def test_launch_arguments(self):
        """Test that launch arguments come from the settings"""
        manager, playwright, browser, page = mock_playwright()

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            await self.renderer.render_html_to_pdf('<p>x</p>', self.config)

        playwright.chromium.launch.assert_awaited_once_with(
            headless=True,
            args=['--no-sandbox', '--disable-setuid-sandbox'],
            executable_path=None,
        )

    async def test_print_options(self):
        """Test paper format, orientation, margins and backgrounds"""
        config = resolve_config({
            'page_size': 'a4',
            'orientation': 'landscape',
            'margins': {'top': 1, 'right': 0.5, 'bottom': 0.75, 'left': 0.5},
        })
        manager, playwright, browser, page = mock_playwright()

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            await self.renderer.render_html_to_pdf('<p>x</p>', config)

        page.pdf.assert_awaited_once_with(
            format='A4',
            landscape=True,
            margin={'top': '1in', 'right': '0.5in', 'bottom': '0.75in', 'left': '0.5in'},
            print_background=True,
        )

    async def test_print_failure_closes_browser(self):
        """Test that a failing print still closes the browser once"""
        manager, playwright, browser, page = mock_playwright()
        page.pdf.side_effect = RuntimeError('Target closed')

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            with self.assertLogs('bizdocs.printing.playwright_renderer', level='ERROR'):
                with self.assertRaises(BrowserRenderError) as cm:
                    await self.renderer.render_html_to_pdf('<p>x</p>', self.config)

        browser.close.assert_awaited_once()
        self.assertIsInstance(cm.exception.__cause__, RuntimeError)
        self.assertIsInstance(cm.exception, RenderError)

    async def test_load_failure_closes_browser(self):
        """Test that a failing content load closes the browser once"""
        manager, playwright, browser, page = mock_playwright()
        page.set_content.side_effect = TimeoutError('networkidle')

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            with self.assertLogs('bizdocs.printing.playwright_renderer', level='ERROR'):
                with self.assertRaises(BrowserRenderError):
                    await self.renderer.render_html_to_pdf('<p>x</p>', self.config)

        browser.close.assert_awaited_once()
        page.pdf.assert_not_awaited()

    async def test_font_wait_timeout_closes_browser(self):
        """Test that a font wait that never settles times out and closes the browser once"""
        renderer = PlaywrightRenderer(settings=BrowserSettings(timeout_ms=50))
        manager, playwright, browser, page = mock_playwright()
        page.evaluate_handle = MagicMock(side_effect=lambda *args: asyncio.sleep(3600))

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            with self.assertLogs('bizdocs.printing.playwright_renderer', level='ERROR'):
                with self.assertRaises(BrowserRenderError):
                    await renderer.render_html_to_pdf('<p>x</p>', self.config)

        browser.close.assert_awaited_once()
        page.pdf.assert_not_awaited()

    async def test_launch_failure(self):
        """Test that a failing launch is reported as BrowserRenderError"""
        manager, playwright, browser, page = mock_playwright()
        playwright.chromium.launch.side_effect = RuntimeError('Executable doesn\'t exist')

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            with self.assertLogs('bizdocs.printing.playwright_renderer', level='ERROR'):
                with self.assertRaises(BrowserRenderError):
                    await self.renderer.render_html_to_pdf('<p>x</p>', self.config)

        browser.close.assert_not_awaited()

    def test_pdf_margins(self):
        """Test inch-suffixed margin strings"""
        self.assertEqual(
            pdf_margins(resolve_config()),
            {'top': '0.5in', 'right': '0.5in', 'bottom': '0.5in', 'left': '0.5in'},
        )


class PdfRenderServiceTestCase(IsolatedAsyncioTestCase):
    """Test cases for PdfRenderService"""

    async def test_render_defaults_to_buffer(self):
        """Test that the browser backend returns a buffer by default"""
        renderer = FakeRenderer()
        service = PdfRenderService(renderer=renderer)

        result = await service.render('<p>x</p>', title='Invoice')

        self.assertEqual(result.buffer, ONE_PAGE_PDF)
        self.assertGreaterEqual(result.pages, 1)
        html, config = renderer.calls[0]
        self.assertIn('<p>x</p>', html)
        self.assertIn('<title>Invoice</title>', html)
        self.assertEqual(config.page_size, 'letter')

    async def test_render_with_mocked_browser(self):
        """Test the full browser path with a mocked Playwright"""
        manager, playwright, browser, page = mock_playwright()
        service = PdfRenderService(renderer=PlaywrightRenderer(settings=BrowserSettings()))

        with patch('bizdocs.printing.playwright_renderer.async_playwright', return_value=manager):
            result = await service.render('<p>x</p>')

        self.assertGreater(len(result.buffer), 0)
        self.assertGreaterEqual(result.pages, 1)
        browser.close.assert_awaited_once()

    async def test_page_count_estimated(self):
        """Test that the page count is scanned from the returned bytes"""
        pdf = b'%PDF << /Type /Page >> << /Type /Page >> << /Type /Pages >>'
        service = PdfRenderService(renderer=FakeRenderer(pdf))

        result = await service.render('<p>x</p>', RenderOptions(format='base64'))

        self.assertEqual(result.pages, 2)
        self.assertEqual(base64.b64decode(result.base64), pdf)

    async def test_save_falls_back_to_buffer(self):
        """Test that 'save' is not supported on the browser backend"""
        service = PdfRenderService(renderer=FakeRenderer())

        with self.assertLogs('bizdocs.printing.dto', level='WARNING'):
            result = await service.render('<p>x</p>', RenderOptions(format='save', filename='never.pdf'))

        self.assertEqual(result.buffer, ONE_PAGE_PDF)
        self.assertFalse(os.path.exists('never.pdf'))

    async def test_sanitize_option(self):
        """Test that sanitize=True cleans the fragment before printing"""
        renderer = FakeRenderer()
        service = PdfRenderService(renderer=renderer)

        await service.render('<p>ok</p><script>alert(1)</script>', RenderOptions(sanitize=True))

        html, _ = renderer.calls[0]
        self.assertNotIn('<script', html)
        self.assertIn('<p>ok</p>', html)

    async def test_renderer_errors_propagate(self):
        """Test that print failures reach the caller"""
        renderer = FakeRenderer()
        renderer.render_html_to_pdf = AsyncMock(side_effect=BrowserRenderError('Browser print failed'))
        service = PdfRenderService(renderer=renderer)

        with self.assertRaises(BrowserRenderError):
            await service.render('<p>x</p>')


@skipUnless(os.environ.get('BIZDOCS_BROWSER_TESTS'), 'Set BIZDOCS_BROWSER_TESTS=1 to print with Chromium')
class ChromiumIntegrationTestCase(IsolatedAsyncioTestCase):
    """Test cases that print with a real Chromium"""

    async def test_print_paragraph(self):
        """Test printing a minimal fragment"""
        service = PdfRenderService()
        result = await service.render('<p>x</p>')

        self.assertTrue(result.buffer.startswith(b'%PDF'))
        self.assertGreaterEqual(result.pages, 1)
