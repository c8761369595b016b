from datetime import timedelta

from clinic.forms.validation import FormState, date_order, rules
from clinic.utils import today


def patient_form():
    return FormState(
        {'firstName': '', 'email': '', 'notes': ''},
        {'firstName': rules.requires('El nombre'), 'email': rules.email},
    )


def test_required_rule():
    assert rules.required('', 'El nombre') == 'El nombre es obligatorio'
    assert rules.required('   ', 'El nombre') == 'El nombre es obligatorio'
    assert rules.required(None, 'El nombre') == 'El nombre es obligatorio'
    assert rules.required('Ana', 'El nombre') == ''


def test_email_rule():
    assert rules.email('') == 'El email es obligatorio'
    assert rules.email('bad') == 'Formato de email inválido'
    assert rules.email('ana@example.com') == ''


def test_phone_rule():
    assert rules.phone('+34 (600) 000-000') == ''
    assert rules.phone('call me') == 'Formato de teléfono inválido'


def test_dni_rule_accepts_dni_and_nie():
    assert rules.dni('12345678Z') == ''
    assert rules.dni('X1234567L') == ''
    assert rules.dni('1234') == 'Formato de DNI/NIE inválido'
    assert rules.dni('') == 'El DNI/NIE es obligatorio'


def test_age_rule():
    assert rules.age('1990-05-01') == ''
    assert rules.age('') == 'La fecha de nacimiento es obligatoria'
    future = (today() + timedelta(days=400)).isoformat()
    assert rules.age(future) == 'Fecha de nacimiento inválida'
    assert rules.age('1800-01-01') == 'Fecha de nacimiento inválida'


def test_icd10_rule_is_optional():
    assert rules.icd10('') == ''
    assert rules.icd10('J06.9') == ''
    assert rules.icd10('j06') != ''


def test_optional_wrapper():
    check = rules.optional(rules.dni)
    assert check('') == ''
    assert check('nope') == 'Formato de DNI/NIE inválido'


def test_validate_form_collects_errors():
    form = patient_form()
    form.update_field('email', 'bad')
    assert form.validate_form() is False
    assert form.errors == {
        'firstName': 'El nombre es obligatorio',
        'email': 'Formato de email inválido',
    }


def test_field_without_validator_never_errors():
    form = patient_form()
    form.update_field('firstName', 'Ana')
    form.update_field('email', 'ana@example.com')
    form.update_field('notes', '')
    assert form.validate_form() is True
    assert 'notes' not in form.errors


def test_update_field_does_not_validate_clean_field():
    form = patient_form()
    form.update_field('email', 'bad')
    assert form.errors == {}


def test_update_field_revalidates_field_with_error():
    form = patient_form()
    form.validate_form()
    assert form.error_for('firstName')
    form.update_field('firstName', 'Ana')
    assert form.error_for('firstName') == ''
    # a still-invalid value keeps an error
    form.update_field('email', 'still bad')
    assert form.error_for('email') == 'Formato de email inválido'


def test_validate_field():
    form = patient_form()
    assert form.validate_field('email', 'x') is False
    assert form.validate_field('email', 'a@b.co') is True
    assert form.errors == {}


def test_record_rules_run_after_field_rules_pass():
    form = FormState(
        {'startDate': '', 'endDate': ''},
        {'startDate': rules.requires('La fecha de inicio')},
        [date_order('startDate', 'endDate', 'la fecha de inicio', 'La fecha de fin')],
    )
    form.update_field('endDate', '2024-01-01')
    assert form.validate_form() is False
    assert list(form.errors) == ['startDate']

    form.update_field('startDate', '2024-02-01')
    assert form.validate_form() is False
    assert form.errors == {'endDate': 'La fecha de fin debe ser posterior a la fecha de inicio'}

    form.update_field('endDate', '2024-03-01')
    assert form.validate_form() is True


def test_equal_dates_are_rejected():
    assert rules.date_range('2024-01-01', '2024-01-01', 'inicio', 'Fin') == 'Fin debe ser posterior a inicio'


def test_reset_and_submitting_flag():
    form = patient_form()
    form.update_field('firstName', 'Ana')
    form.validate_form()
    form.set_submitting(True)
    form.reset()
    assert form.data['firstName'] == ''
    assert form.errors == {}
    assert form.is_submitting is False


def test_integer_rule():
    check = rules.integer('El paciente')
    assert check('12') == ''
    assert check(' 7 ') == ''
    assert check('') == 'El paciente es obligatorio'
    assert check('abc') == 'El paciente debe ser un número'


def test_optional_integer_allows_blank():
    check = rules.optional(rules.integer('La capacidad'))
    assert check('') == ''
    assert check('muchos') == 'La capacidad debe ser un número'
