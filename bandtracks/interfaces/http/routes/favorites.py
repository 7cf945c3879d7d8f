"""Favorite toggling and listings."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from bandtracks.errors import InvalidRequest
from bandtracks.models.dto import FavoriteEntry


favorite_bp = Blueprint('favorite_bp', __name__, url_prefix='/favoritos')

ADDED_MESSAGE = "Canción marcada como favorita"
REMOVED_MESSAGE = "Canción desmarcada como favorita"


def _registry():
    return current_app.extensions['favorites_registry']


def _serialize(favorite: FavoriteEntry) -> dict:
    return favorite.model_dump(by_alias=True, mode='json')


@favorite_bp.route('', methods=['GET'])
def list_favorites():
    return jsonify([_serialize(fav) for fav in _registry().list_favorites()]), 200


@favorite_bp.route('', methods=['POST'])
def toggle_favorite():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    try:
        result = _registry().toggle_favorite(
            payload.get('nombre_banda'),
            payload.get('cancion_id'),
            payload.get('usuario'),
            payload.get('ranking'),
        )
    except InvalidRequest as e:
        return jsonify({'error': e.message}), e.status_code

    if result.added:
        return jsonify({'message': ADDED_MESSAGE, 'favorite': _serialize(result.entry)}), 201
    return jsonify({'message': REMOVED_MESSAGE, **_serialize(result.entry)}), 200


__all__ = ['favorite_bp']
