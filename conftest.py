import re
import shutil
import time
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from common.constants import BASE_URL_ENV_VARIABLE, DEFAULT_BROWSER, DEFAULT_TIMEOUT
from utils.config_utils import get_effective_config_value, load_config, parse_bool


REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"
CONFIG_FILE = Path(__file__).parent / "config.json"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
CONFIG = load_config(CONFIG_FILE)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests against a live application",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--log_steps",
        action="store",
        choices=["true", "false"],
        help="Print every browser interaction",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("e2e"):
        return

    skip_e2e = pytest.mark.skip(reason="end-to-end test, run with --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
def resolve_flag(pytestconfig, cfg: dict, name: str, default: bool) -> bool:
    """CLI option wins over config.json, config.json over the default."""
    value = pytestconfig.getoption(name)
    if value is None:
        value = cfg.get(name, default)
    return parse_bool(value)


@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    # Browser and headless (pytest-playwright options)
    browsers = pytestconfig.getoption("browser")
    headed = pytestconfig.getoption("headed")
    if browsers:
        cfg["browser"] = browsers[0]
    cfg["headless"] = not bool(headed)

    # Base URL (pytest-base-url option --base-url)
    base_url = pytestconfig.getoption("base_url")
    if base_url:
        cfg["base_url"] = base_url
    elif not cfg.get("base_url"):
        cfg["base_url"] = get_effective_config_value(BASE_URL_ENV_VARIABLE, cfg) or ""

    # Debug and report switches
    cfg["highlight"] = resolve_flag(pytestconfig, cfg, "highlight", False)
    cfg["log_steps"] = resolve_flag(pytestconfig, cfg, "log_steps", False)
    cfg["screenshot_on_error"] = resolve_flag(pytestconfig, cfg, "screenshot_on_error", True)

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        try:
            cfg["step_delay"] = float(cfg.get("step_delay", 0.0))
        except (TypeError, ValueError):
            cfg["step_delay"] = 0.0

    return cfg


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", DEFAULT_BROWSER)
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context(ignore_https_errors=True)
    context.set_default_timeout(config.get("timeout", DEFAULT_TIMEOUT))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", DEFAULT_TIMEOUT))
    yield page
    page.close()


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    config.addinivalue_line("markers", "e2e: needs a running application and a browser")
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            if f.is_dir():
                shutil.rmtree(f)
            else:
                f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    name = re.sub(r'_+', '_', name)
    name = name.strip('._')
    return name[:150]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    if not resolve_flag(item.config, CONFIG, "screenshot_on_error", True):
        return

    from playwright.sync_api import Error, Page

    page = item.funcargs.get("page", None)
    if not page or not isinstance(page, Page):
        return

    from datetime import datetime

    # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
    ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
    screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

    try:
        # Give browser time to render any failure overlay
        time.sleep(0.2)
        page.screenshot(path=str(screenshot_path), full_page=True)
    except Error as e:
        print(f"[WARN] Screenshot capture failed: {e}")
        return

    print(f"[INFO] Screenshot saved → {screenshot_path}")

    html = item.config.pluginmanager.getplugin("html")
    if html:
        rel_path = screenshot_path.name
        link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
        rep.extras = getattr(rep, "extras", [])
        rep.extras.append(html.extras.html(link_html))
        rep.extras.append(html.extras.image(rel_path))
