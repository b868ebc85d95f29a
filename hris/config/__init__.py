"""
Конфигурация Django-проекта HRIS.

Модули настроек лежат в ``hris.config.settings``: ``base`` содержит общие
параметры, остальные модули переопределяют базу данных, channel layer и
кеш под конкретное окружение.
"""
