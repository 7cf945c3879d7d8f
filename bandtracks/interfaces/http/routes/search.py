import logging

from flask import Blueprint, current_app, jsonify, request

from bandtracks.errors import InvalidRequest, UpstreamError

logger = logging.getLogger(__name__)

search_bp = Blueprint('search_bp', __name__)


def get_search_service():
    return current_app.extensions['track_search_service']


@search_bp.route('/search_tracks', methods=['GET'])
def search_tracks_api():
    band_name = request.args.get('name', '')
    try:
        result = get_search_service().search_tracks(band_name)
    except InvalidRequest as e:
        return jsonify({"error": e.message}), e.status_code
    except UpstreamError as e:
        # Cause already logged by the service; keep upstream details private
        return jsonify({"error": e.public_message}), e.status_code
    return jsonify(result.model_dump(by_alias=True, mode='json'))


__all__ = ['search_bp']
