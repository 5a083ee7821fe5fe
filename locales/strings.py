#!/usr/bin/env python3
# SportViewer - GPS activity track analyzer
# Copyright (C) 2024 SportViewer Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Localization strings for SportViewer.
French language dictionary for user interface.
"""

# Messages d'erreur
ERRORS = {
    'file_not_found': "Fichier introuvable : {file_path}",
    'invalid_gpx': "Fichier GPX invalide : {reason}",
    'no_track': "Aucune trace (<trk>) dans le fichier GPX",
    'invalid_point': "Point {index} invalide : {reason}",
    'missing_time': "Point {index} sans horodatage valide",
    'empty_track': "La trace ne contient aucun point",
    'invalid_json': "Export JSON invalide : {reason}",
    'missing_field': "Champ manquant dans l'export : {field}",
    'write_failed': "Impossible d'écrire {file_path} : {reason}",
}

# Avertissements (warnings) - problèmes critiques
WARNINGS = {
    'non_monotonic': "Horodatages non croissants : {count} point(s) remontent dans le temps",
    'no_moving_time': "Aucun temps en mouvement : vitesse moyenne en mouvement indisponible",
}

# Précautions (cautions) - remarques moins critiques
CAUTIONS = {
    'duplicate_timestamps': "{count} point(s) partagent l'horodatage du point précédent",
    'no_speed': "Aucune vitesse positive enregistrée",
    'pauses': "{count} pause(s) détectée(s), {duration} au total",
}

# Libellés
LABELS = {
    'untitled_track': "Activité sans nom",
    'hidden_points': "... {count} points masqués ...",
    'speed_legend': "Vitesse (km/h)",
}
