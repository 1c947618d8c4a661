#!/usr/bin/env python3
"""
Generate Install URL Script
Turns a pasted IMDb Cookie header into a personal Stremio install URL
"""
import re
import sys
from app.core.config import settings
from app.utils.credential import encode_credential


def main():
    print("🎬 IMDb Top Picks - Install URL Generator")
    print("=" * 60)
    print("\nOpen https://www.imdb.com/what-to-watch/top-picks/ while logged in")
    print("and copy the full Cookie header from DevTools → Network.")

    raw = input("\nPaste your IMDb Cookie header: ").strip()
    raw = re.sub(r"^cookie:\s*", "", raw, flags=re.IGNORECASE)
    if not raw:
        print("❌ A cookie is required!")
        sys.exit(1)

    segment = encode_credential(raw)
    base_url = str(settings.BASE_URL).rstrip('/')
    install_url = f"{base_url}/{segment}/manifest.json"

    print("\n" + "=" * 60)
    print("✅ URL generated successfully!")
    print("=" * 60)
    print(f"\n📋 Install URL:\n{install_url}\n")
    print("🔗 Installation Steps:")
    print("  1. Copy the URL above")
    print("  2. Open Stremio")
    print("  3. Go to Add-ons → Install from URL")
    print("  4. Paste the URL and click Install")
    print("\n⚠️  The URL contains your IMDb session. Do not share it.")
    print("=" * 60)


if __name__ == "__main__":
    main()
