from flask import Blueprint, request, jsonify
from newsletter.errors import RouteError
from newsletter.services import users as user_service

users_bp = Blueprint("users", __name__, url_prefix="/users")

PARAM_MISSING_ERR = "One or more of the required parameters was missing."


def _raw_user():
  """The `user` object of a JSON body, or the fields of a urlencoded form."""
  if request.form:
    user = request.form.to_dict()
    if user.get("id", "").isdigit():
      user["id"] = int(user["id"])
    return user

  body = request.get_json(silent=True)
  if not isinstance(body, dict):
    return None
  return body.get("user")


def _user_from_body(require_id=False):
  user = _raw_user()
  if not isinstance(user, dict):
    raise RouteError(400, PARAM_MISSING_ERR)

  for field in ("name", "email"):
    if not isinstance(user.get(field), str) or not user[field].strip():
      raise RouteError(400, PARAM_MISSING_ERR)

  if require_id:
    user_id = user.get("id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
      raise RouteError(400, PARAM_MISSING_ERR)
    return {"id": user_id, "name": user["name"], "email": user["email"]}

  return {"name": user["name"], "email": user["email"]}


@users_bp.route("/all", methods=["GET"])
def get_all():
  """List every stored user.
  ---
  tags:
    - users
  responses:
    200:
      description: 'All users, as `{"users": [...]}`.'
  """
  return jsonify({"users": user_service.get_all()}), 200


@users_bp.route("/add", methods=["POST"])
def add():
  """Add a user.
  ---
  tags:
    - users
  parameters:
    - name: body
      in: body
      required: true
      schema:
        type: object
        properties:
          user:
            type: object
            required: [name, email]
            properties:
              name:
                type: string
              email:
                type: string
  responses:
    201:
      description: User created.
    400:
      description: Name or email missing.
    409:
      description: Email already in use.
  """
  user_service.add_one(_user_from_body())
  return "", 201


@users_bp.route("/update", methods=["PUT"])
def update():
  """Update the name and email of an existing user.
  ---
  tags:
    - users
  parameters:
    - name: body
      in: body
      required: true
      schema:
        type: object
        properties:
          user:
            type: object
            required: [id, name, email]
            properties:
              id:
                type: integer
              name:
                type: string
              email:
                type: string
  responses:
    200:
      description: User updated.
    400:
      description: Id, name or email missing.
    404:
      description: Unknown user id.
    409:
      description: Email belongs to another user.
  """
  user_service.update_one(_user_from_body(require_id=True))
  return "", 200


@users_bp.route("/delete/<int:user_id>", methods=["DELETE"])
def delete(user_id):
  """Delete a user by id.
  ---
  tags:
    - users
  parameters:
    - name: user_id
      in: path
      type: integer
      required: true
  responses:
    200:
      description: User deleted.
    404:
      description: Unknown user id.
  """
  user_service.delete(user_id)
  return "", 200
