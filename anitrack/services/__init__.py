"""
Services applicatifs.

- filename_parser, folder_categorizer : cascades de parsing
- batch_analyzer, library_scanner : inventaire des arborescences
- query_parser, search_query, ranker, search : recherche de releases
- quality_scorer, update_matcher : suivi des nouveaux episodes

Les services dependent des ports de core/, jamais des adaptateurs.
"""
