# pager/docker/gunicorn.conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: конфигурация gunicorn для Django-проекта pager
# ─────────────────────────────────────────────────────────────────────────────

import multiprocessing  # число CPU
import os               # переменные окружения

wsgi_app = "pager.wsgi:application"  # точка входа WSGI
bind = os.getenv("GUNICORN_BIND", "unix:/run/gunicorn/gunicorn.sock")  # unix-сокет для nginx
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))  # число воркеров
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))  # таймаут воркера
accesslog = "-"  # лог запросов в stdout
errorlog = "-"   # лог ошибок в stdout
loglevel = os.getenv("LOG_LEVEL", "info").lower()
worker_class = "sync"  # обычный sync-воркер: запросы короткие и без I/O
