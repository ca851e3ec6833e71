import json
import logging
import os
import random
import tempfile
import threading
from datetime import datetime, timezone
from flask import current_app

from newsletter.errors import RouteError

logger = logging.getLogger(__name__)

USER_NOT_FOUND_ERR = "User not found"
EMAIL_TAKEN_ERR = "A user with this email already exists"
MAX_USER_ID = 10 ** 12


def new_user(name, email):
  return {
    "id": random.randrange(MAX_USER_ID),
    "name": name,
    "email": email,
    "created": datetime.now(timezone.utc).isoformat(),
  }


# Held around every read-modify-write of the JSON file.
_store_lock = threading.RLock()


class UserStore:
  """Keeps users in a small JSON file shaped like `{"users": [...]}`."""

  def __init__(self, path):
    self.path = path

  def _open(self):
    with _store_lock:
      if not os.path.exists(self.path):
        self._save({"users": []})
      with open(self.path, "r", encoding="utf-8") as f:
        return json.load(f)

  def _save(self, data):
    directory = os.path.dirname(os.path.abspath(self.path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    try:
      with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
      os.replace(tmp_path, self.path)
    except BaseException:
      os.unlink(tmp_path)
      raise

  def get_one(self, email):
    for user in self._open()["users"]:
      if user["email"] == email:
        return user
    return None

  def persists(self, user_id):
    return any(user["id"] == user_id for user in self._open()["users"])

  def get_all(self):
    return self._open()["users"]

  def add(self, user):
    with _store_lock:
      data = self._open()
      data["users"].append(user)
      self._save(data)

  def update(self, user):
    with _store_lock:
      data = self._open()
      for i, existing in enumerate(data["users"]):
        if existing["id"] == user["id"]:
          data["users"][i] = {**existing, **user}
          break
      self._save(data)

  def delete(self, user_id):
    with _store_lock:
      data = self._open()
      data["users"] = [u for u in data["users"] if u["id"] != user_id]
      self._save(data)


def get_store():
  return UserStore(current_app.config["DATABASE_PATH"])


def get_all():
  return get_store().get_all()


def add_one(user):
  store = get_store()
  with _store_lock:
    if store.get_one(user["email"]):
      raise RouteError(409, EMAIL_TAKEN_ERR)
    user = new_user(user["name"], user["email"])
    store.add(user)
  logger.info(f"Added user {user['id']} <{user['email']}>")
  return user


def update_one(user):
  store = get_store()
  with _store_lock:
    if not store.persists(user["id"]):
      raise RouteError(404, USER_NOT_FOUND_ERR)
    owner = store.get_one(user["email"])
    if owner and owner["id"] != user["id"]:
      raise RouteError(409, EMAIL_TAKEN_ERR)
    store.update(user)
  logger.info(f"Updated user {user['id']}")


def delete(user_id):
  store = get_store()
  with _store_lock:
    if not store.persists(user_id):
      raise RouteError(404, USER_NOT_FOUND_ERR)
    store.delete(user_id)
  logger.info(f"Deleted user {user_id}")
