#!/usr/bin/env python3
"""
Flask Web Application for the Trace Visualizer
Provides REST API endpoints that load traces and expose the waterfall view model.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import os
import tempfile
from trace_visualizer import TraceVisualizer, EmptyTraceError, ParseError, SpanNotFoundError
from trace_visualizer.web import prepare_view, build_span_details, build_search_status

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()
app.config['SAMPLE_TRACE_PATH'] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'sample-trace.json')
app.config['DEFAULT_CONTAINER_WIDTH'] = 1200

ALLOWED_EXTENSIONS = {'json'}

visualizer = TraceVisualizer()

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def load_path(filepath):
    try:
        result = visualizer.load_file(filepath)
    except ParseError as e:
        return jsonify({'error': str(e)}), 400
    except EmptyTraceError as e:
        return jsonify({'error': str(e)}), 422
    return jsonify(result.to_dict())


@app.errorhandler(SpanNotFoundError)
def span_not_found(e):
    return jsonify({'error': str(e)}), 404


@app.before_request
def require_trace():
    """Every view/state endpoint needs a loaded trace."""
    if request.endpoint in ('load_trace', 'load_sample', 'static') or request.endpoint is None:
        return None
    if not visualizer.has_trace:
        return jsonify({'error': 'No trace loaded'}), 404
    return None


@app.route('/api/trace', methods=['POST'])
def load_trace():
    """
    API endpoint to load a trace file.
    Accepts: multipart/form-data with a 'file' field holding trace JSON
    Returns: JSON load summary
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400

    filename = secure_filename(file.filename) or 'trace.json'
    filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
    file.save(filepath)
    try:
        return load_path(filepath)
    finally:
        os.remove(filepath)


@app.route('/api/trace/sample', methods=['POST'])
def load_sample():
    """Load the bundled sample trace."""
    sample_path = app.config['SAMPLE_TRACE_PATH']
    if not os.path.exists(sample_path):
        return jsonify({'error': 'Sample trace not found'}), 404
    return load_path(sample_path)


@app.route('/api/view', methods=['GET'])
def view():
    """
    Full waterfall view model.
    Query params:
      - 'width': container width in pixels (optional, default: 1200)
    """
    width = request.args.get('width', app.config['DEFAULT_CONTAINER_WIDTH'], type=float)
    return jsonify(prepare_view(visualizer, width))


@app.route('/api/spans/<span_id>', methods=['GET'])
def span_details(span_id):
    return jsonify(build_span_details(visualizer, span_id))


@app.route('/api/spans/<span_id>/select', methods=['POST'])
def select_span(span_id):
    visualizer.select_span(span_id)
    return jsonify(build_span_details(visualizer, span_id))


@app.route('/api/spans/<span_id>/toggle', methods=['POST'])
def toggle_span(span_id):
    visualizer.require_span(span_id)
    collapsed = visualizer.toggle_collapse(span_id)
    return jsonify({'span_id': span_id, 'collapsed': collapsed})


@app.route('/api/collapse-all', methods=['POST'])
def collapse_all():
    visualizer.collapse_all()
    return jsonify({'collapsed': sorted(visualizer.visibility.collapsed)})


@app.route('/api/expand-all', methods=['POST'])
def expand_all():
    visualizer.expand_all()
    return jsonify({'collapsed': []})


@app.route('/api/search', methods=['GET'])
def search():
    visualizer.search(request.args.get('q', ''))
    return jsonify(build_search_status(visualizer))


@app.route('/api/search/next', methods=['POST'])
def search_next():
    visualizer.navigate_search(1)
    return jsonify(build_search_status(visualizer))


@app.route('/api/search/prev', methods=['POST'])
def search_prev():
    visualizer.navigate_search(-1)
    return jsonify(build_search_status(visualizer))


@app.route('/api/search', methods=['DELETE'])
def clear_search():
    visualizer.clear_search()
    return jsonify(build_search_status(visualizer))


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
