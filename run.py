#!/usr/bin/env python3
"""
AE Lingo - Local Launcher
=========================
Start the AE Lingo server and open it in the default browser.

Usage:
    python run.py
    python -m ae_lingo
"""
import sys
import threading
import time
import webbrowser
from pathlib import Path

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

from ae_lingo.config import config


class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'


APP_URL = f'http://localhost:{config.server.port}'


def print_banner():
    """Display startup banner"""
    print(f"\n{Colors.CYAN}{'='*60}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.GREEN}  🎬 AE LINGO - After Effects glossary translator{Colors.RESET}")
    print(f"{Colors.CYAN}{'='*60}{Colors.RESET}")
    print(f"  Server: {APP_URL}")
    print(f"  Model:  {config.gemini.default_model}")
    print(f"{Colors.CYAN}{'='*60}{Colors.RESET}\n")


def check_credential() -> bool:
    """Check that a Gemini API key is configured"""
    return config.gemini.has_api_key


def open_browser():
    """Open the app in the default browser once the server is up"""
    time.sleep(1.5)
    print(f"{Colors.CYAN}🌐 Opening application in browser...{Colors.RESET}")
    try:
        webbrowser.open(APP_URL)
    except webbrowser.Error as e:
        print(f"{Colors.RED}✗ Could not open browser: {e}{Colors.RESET}")


def main():
    """Main entry point"""
    print_banner()

    print(f"{Colors.YELLOW}🔍 Checking API key...{Colors.RESET}")
    if check_credential():
        print(f"{Colors.GREEN}   ✓ GEMINI_API_KEY is set{Colors.RESET}")
    else:
        print(f"{Colors.RED}   ⚠️  GEMINI_API_KEY is not set{Colors.RESET}")
        print(f"{Colors.YELLOW}   Translations will fail until it is configured{Colors.RESET}")

    print(f"\n{Colors.RED}   Press Ctrl+C to close{Colors.RESET}\n")

    threading.Thread(target=open_browser, daemon=True).start()

    from ae_lingo.app import create_app
    app = create_app()
    app.run(host=config.server.host, port=config.server.port, debug=False, use_reloader=False, threaded=True)


if __name__ == '__main__':
    main()
