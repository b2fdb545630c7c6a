from __future__ import annotations

from employee_desk.api.ui import FIELD_INPUTS, templates
from employee_desk.models.employee import Employee, FormErrors, FormMode, FormView

VALID_FORM = {
    "name": "Jo",
    "email": "jo@acme.io",
    "department": "Eng",
    "company": "Acme",
    "city": "NYC",
}


def render_form(view: FormView) -> str:
    return templates.get_template("partials/employee_form.html").render(form=view, fields=FIELD_INPUTS)


def render_card(employee: Employee) -> str:
    return templates.get_template("partials/employee_card.html").render(employee=employee)


def _view(**overrides) -> FormView:
    values = {
        "mode": FormMode.CREATE,
        "title": "Add Employee",
        "submit_label": "Add",
        "record": Employee(),
        "errors": FormErrors(),
        "can_delete": False,
    }
    values.update(overrides)
    return FormView(**values)


def test_render_form_shows_inline_errors():
    html = render_form(_view(errors=FormErrors(name_error="Name is required")))
    assert '<div class="error">Name is required</div>' in html
    assert "Delete" not in html


def test_render_form_edit_mode_has_delete():
    html = render_form(
        _view(
            mode=FormMode.EDIT,
            title="Edit Employee",
            submit_label="Update",
            record=Employee(id="1", name="X"),
            can_delete=True,
        )
    )
    assert "<h2>Edit Employee</h2>" in html
    assert 'formaction="/ui/delete"' in html
    assert 'value="X"' in html


def test_render_card_escapes_values():
    html = render_card(Employee(id="7", name="<b>Bob</b>", email="bob@acme.io"))
    assert "&lt;b&gt;Bob&lt;/b&gt;" in html
    assert 'action="/ui/select/7"' in html


def test_page_lists_employees(form_client):
    response = form_client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "<h1>Employee Management</h1>" in response.text
    assert "Jane Roe" in response.text
    assert "<h2>Add Employee</h2>" in response.text


def test_page_submit_valid_draft_redirects(form_client, fake_store):
    response = form_client.post("/ui/submit", data=VALID_FORM, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert fake_store.create.await_args.args[0].email == "jo@acme.io"


def test_page_submit_invalid_draft_renders_errors(form_client, fake_store):
    response = form_client.post("/ui/submit", data={**VALID_FORM, "city": ""})

    assert response.status_code == 200
    assert "City is required" in response.text
    assert 'value="Jo"' in response.text
    fake_store.create.assert_not_awaited()


def test_page_select_and_update(form_client, fake_store):
    response = form_client.post("/ui/select/2")
    assert response.status_code == 200
    assert "<h2>Edit Employee</h2>" in response.text

    form_client.post("/ui/submit", data={**VALID_FORM, "name": ""})

    sent = fake_store.update.await_args.args[0]
    assert sent.id == "2"
    assert sent.name == ""


def test_page_select_unknown_returns_404(form_client):
    response = form_client.post("/ui/select/nope")
    assert response.status_code == 404


def test_page_delete(form_client, fake_store):
    form_client.post("/ui/select/1")
    response = form_client.post("/ui/delete", follow_redirects=False)

    assert response.status_code == 303
    fake_store.delete.assert_awaited_once_with("1")


def test_page_delete_without_selection_returns_409(form_client):
    response = form_client.post("/ui/delete")
    assert response.status_code == 409


def test_render_card_encodes_id_in_select_url():
    html = render_card(Employee(id="a/b?c#d", name="Odd"))
    assert 'action="/ui/select/a%2Fb%3Fc%23d"' in html


def test_page_select_with_encoded_id(form_client, fake_store):
    fake_store.employees.append(Employee(id="a/b?c", name="Odd Id"))

    response = form_client.post("/ui/select/a%2Fb%3Fc")

    assert response.status_code == 200
    assert "<h2>Edit Employee</h2>" in response.text
    assert 'value="Odd Id"' in response.text
