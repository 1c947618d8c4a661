"""
Instructions Endpoint
Serves the page that turns a pasted IMDb cookie into a personal install URL
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from app.api.dependencies import credential_segment
from app.models.stremio import Manifest

router = APIRouter()


# Decorators register bottom-up: literal paths must win over "/{credential}"
@router.get("/{credential}", response_class=HTMLResponse)
@router.get("/{credential}/", response_class=HTMLResponse)
@router.get("/{credential}/index.html", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse)
@router.get("/", response_class=HTMLResponse)
async def instructions_page(segment: str = Depends(credential_segment)):
    """Serve the instructions page"""

    html_content = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__ADDON_NAME__ → Stremio</title>
    <style>
        body { font-family: system-ui, Arial, sans-serif; max-width: 640px; margin: 40px auto; padding: 0 12px; }
        textarea { width: 100%; height: 8rem; margin: .7em 0; font-family: monospace; }
        button { padding: .5em 1.4em; border-radius: 4px; }
        pre { background: #f6f8fa; padding: .6em 1em; border-radius: 6px; overflow: auto; }
    </style>
</head>
<body>
    <h2>Create your personal add-on URL</h2>
    <ol>
        <li>Open <b>https://www.imdb.com/what-to-watch/top-picks/</b> in a logged-in tab.</li>
        <li>Copy a full <code>Cookie:</code> header from DevTools → Network.</li>
        <li>Paste it below and click <b>Generate URL</b>.</li>
    </ol>
    <textarea id="cookie" placeholder="session-id=…; uu=…"></textarea>
    <button id="generate">Generate URL</button>
    <div id="output"></div>

    <script>
        // Same alphabet as the server: base64url without padding
        function encodeCookie(raw) {
            const bytes = new TextEncoder().encode(raw);
            let binary = '';
            bytes.forEach(b => binary += String.fromCharCode(b));
            return btoa(binary).replace(/\\+/g, '-').replace(/\\//g, '_').replace(/=+$/, '');
        }

        document.getElementById('generate').addEventListener('click', () => {
            const raw = document.getElementById('cookie').value.trim().replace(/^Cookie:\\s*/i, '');
            if (!raw) {
                alert('Paste the cookie first');
                return;
            }
            const url = location.origin + '/' + encodeCookie(raw) + '/manifest.json';
            document.getElementById('output').innerHTML =
                '<p>Install in Stremio:</p><pre>' + url + '</pre>' +
                '<p><a target="_blank" href="' + url + '">Open manifest</a></p>';
        });
    </script>
</body>
</html>
"""

    return html_content.replace("__ADDON_NAME__", Manifest.model_fields["name"].default)
