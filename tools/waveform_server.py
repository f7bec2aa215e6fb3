"""
waveform_server.py — HTTP bridge around AWE's generators

Usage:
    python tools/waveform_server.py            # serves on 127.0.0.1:5000

Endpoints:
    POST /waveform   multipart field `audio` + optional form fields
                     (type, method, width, height, color, background_color,
                      sample_width, gap_width, amplitude, bars, samples,
                      bar_width) → image/png or image/svg+xml
    GET  /health     {"status": "ok"}

Status codes: 400 for a missing upload or bad options, 422 when the audio
cannot be decoded or converted.
"""
import sys
import importlib
import io
import os
import tempfile


# Fail loudly and helpfully if required Python packages are missing.
def _require_modules(mods):
    missing = []
    for m in mods:
        try:
            importlib.import_module(m)
        except ImportError:
            missing.append(m)
    if missing:
        print("\nERROR: Missing required Python package(s): {}".format(', '.join(missing)))
        print("Install them with:")
        print("  python -m pip install -e .")
        sys.exit(1)


_require_modules(['flask', 'soundfile', 'numpy', 'PIL'])

from flask import Flask, request, send_file, jsonify
from werkzeug.utils import secure_filename

from AWE import waveformer, waveform_svg
from AWE.errors import InvalidArgument, SourceNotFound, WaveformError

app = Flask(__name__)

MIMETYPES = {
    'png': 'image/png',
    'svg': 'image/svg+xml',
}

_INT_FIELDS = ('width', 'height', 'sample_width', 'gap_width', 'samples', 'bar_width')
_FLOAT_FIELDS = ('amplitude', 'auto_width')
_STR_FIELDS = ('type', 'method', 'color', 'background_color')
_BAR_FIELDS = ('method', 'samples', 'amplitude', 'gap_width', 'bar_width', 'height')


def _form_options(form):
    """Pull generator options out of the submitted form; unset fields are skipped."""
    options = {}
    try:
        for key in _INT_FIELDS:
            if form.get(key):
                options[key] = int(form[key])
        for key in _FLOAT_FIELDS:
            if form.get(key):
                options[key] = float(form[key])
    except ValueError as e:
        raise InvalidArgument(str(e)) from e
    for key in _STR_FIELDS:
        if form.get(key):
            options[key] = form[key]
    return options


@app.route('/waveform', methods=['POST'])
def waveform():
    if 'audio' not in request.files:
        return jsonify({'error': 'missing file field `audio`'}), 400
    upload = request.files['audio']
    name = secure_filename(upload.filename or '') or 'input.wav'

    bars = request.form.get('bars', '').lower() in ('1', 'true', 'yes')
    try:
        options = _form_options(request.form)
    except InvalidArgument as e:
        return jsonify({'error': str(e)}), 400

    with tempfile.TemporaryDirectory() as td:
        in_path = os.path.join(td, name)
        upload.save(in_path)
        try:
            if bars:
                options = {k: v for k, v in options.items() if k in _BAR_FIELDS}
                out_path = waveform_svg.generate(in_path, **options)
                out_type = 'svg'
            else:
                options = {k: v for k, v in options.items() if k not in ('samples', 'bar_width')}
                out_path = waveformer.generate(in_path, **options)
                out_type = os.path.splitext(out_path)[1].lstrip('.')
        except (InvalidArgument, SourceNotFound) as e:
            return jsonify({'error': str(e)}), 400
        except WaveformError as e:
            return jsonify({'error': str(e)}), 422

        with open(out_path, 'rb') as f:
            data = io.BytesIO(f.read())

    base = os.path.splitext(name)[0]
    return send_file(
        data,
        mimetype=MIMETYPES[out_type],
        as_attachment=True,
        download_name=f'{base}.{out_type}',
    )


@app.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    # Run on localhost:5000 by default
    app.run(host='127.0.0.1', port=5000)
