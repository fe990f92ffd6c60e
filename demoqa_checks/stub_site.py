from flask import Flask, abort, jsonify, render_template_string, request

FORM_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <title>Practice Form</title>
  <style>
    .hidden { display: none; }
    #state { border: 1px solid #ccc; padding: 4px; width: 200px; cursor: pointer; }
    #state-menu div { padding: 2px 4px; cursor: pointer; }
  </style>
</head>
<body>
  <h1>Practice Form</h1>
  <form id="userForm">
    <input id="firstName" type="text" placeholder="First Name">
    <input id="lastName" type="text" placeholder="Last Name">

    <div id="genderWrapper">
      {% for gender in genders %}
      <input type="radio" name="gender" id="gender-radio-{{ loop.index }}" value="{{ gender }}">
      <label for="gender-radio-{{ loop.index }}">{{ gender }}</label>
      {% endfor %}
    </div>

    <div id="hobbiesWrapper">
      {% for hobby in hobbies %}
      <input type="checkbox" id="hobbies-checkbox-{{ loop.index }}" value="{{ loop.index }}">
      <label for="hobbies-checkbox-{{ loop.index }}">{{ hobby }}</label>
      {% endfor %}
    </div>

    <input id="uploadPicture" type="file">

    <div id="state"><div id="state-value">Select State</div></div>
    <div id="state-menu" class="hidden"></div>

    <button id="submit" type="submit"{% if hide_submit %} style="display: none"{% endif %}>Submit</button>
  </form>
  <div id="result" class="hidden">Thanks for submitting the form</div>

  <script>
    var states = {{ states | tojson }};
    var menu = document.getElementById("state-menu");
    document.getElementById("state").addEventListener("click", function () {
      menu.innerHTML = "";
      states.forEach(function (name) {
        var option = document.createElement("div");
        option.textContent = name;
        option.addEventListener("click", function () {
          document.getElementById("state-value").textContent = name;
          menu.innerHTML = "";
          menu.className = "hidden";
        });
        menu.appendChild(option);
      });
      menu.className = "";
    });
    document.getElementById("userForm").addEventListener("submit", function (event) {
      event.preventDefault();
      document.getElementById("result").className = "";
    });
  </script>
</body>
</html>
"""

GENDERS = ["Male", "Female", "Other"]
HOBBIES = ["Sports", "Reading", "Music"]
STATES = ["NCR", "Uttar Pradesh", "Haryana", "Rajasthan"]


def _post(post_id):
    return {
        "userId": (post_id - 1) // 10 + 1,
        "id": post_id,
        "title": f"post {post_id} title",
        "body": f"post {post_id} body",
    }


def create_app():
    """Local stand-in for the practice form and the /posts API."""
    app = Flask(__name__)

    @app.route("/automation-practice-form", methods=["GET"])
    def practice_form():
        return render_template_string(
            FORM_TEMPLATE,
            genders=GENDERS,
            hobbies=HOBBIES,
            states=STATES,
            hide_submit=request.args.get("hide_submit") == "1",
        )

    @app.route("/posts/<int:post_id>", methods=["GET"])
    def get_post(post_id):
        if not 1 <= post_id <= 100:
            abort(404)
        return jsonify(_post(post_id))

    @app.route("/posts", methods=["POST"])
    def create_post():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "expected a JSON object"}), 400
        return jsonify({**body, "id": 101}), 201

    return app
