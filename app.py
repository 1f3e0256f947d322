import logging

from flask import Flask, render_template, request, redirect, url_for, flash, jsonify
from flask_migrate import Migrate

from config import get_config
from constants import FIELD_LIMITS, RESERVED_RECIPE_NAME
from models import db
from services import (
    RecipeStore, SettingsRecipeRepository, DoughEditor,
    RecipeValidationError, RecipeNotFoundError,
    calculate_dough, export_recipe, format_quantity,
    enable_eggs, disable_eggs, set_flour_weight,
    enable_detailed_composition, disable_detailed_composition,
    add_flour_component, remove_flour_component,
    enable_custom_liquid_blend, disable_custom_liquid_blend,
    add_liquid_component, remove_liquid_component,
    add_amendment, remove_amendment,
)
from utils.forms import previous_flour_weight, recipe_from_form, recipe_from_json

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)

# Register Jinja filter for gram display
app.jinja_env.filters['grams'] = format_quantity


def get_store():
    """Recipe store over the configured key-value slot."""
    return RecipeStore(SettingsRecipeRepository(key=app.config['RECIPE_STORE_KEY']))


def apply_draft_action(draft, action, target):
    """
    Apply an editor button to the draft.

    Actions that only change the draft (toggles, adding or removing a
    component) never touch the store.
    """
    if action == 'enable_eggs':
        return enable_eggs(draft)
    if action == 'disable_eggs':
        return disable_eggs(draft)
    if action == 'enable_detailed':
        return enable_detailed_composition(draft)
    if action == 'disable_detailed':
        return disable_detailed_composition(draft)
    if action == 'add_flour':
        return draft.copy(flour_composition=add_flour_component(draft.flour_composition))
    if action == 'remove_flour':
        return draft.copy(flour_composition=remove_flour_component(draft.flour_composition, target))
    if action == 'enable_liquids':
        return enable_custom_liquid_blend(draft)
    if action == 'disable_liquids':
        return disable_custom_liquid_blend(draft)
    if action == 'add_liquid':
        return draft.copy(liquid_composition=add_liquid_component(draft.liquid_composition))
    if action == 'remove_liquid':
        return draft.copy(liquid_composition=remove_liquid_component(draft.liquid_composition, target))
    if action == 'add_amendment':
        return draft.copy(amendments=add_amendment(draft.amendments))
    if action == 'remove_amendment':
        return draft.copy(amendments=remove_amendment(draft.amendments, target))
    return draft


def render_editor(draft, route_name):
    calculation = calculate_dough(draft)
    return render_template(
        'recipe.html',
        recipe=draft,
        calc=calculation,
        route_name=route_name,
        is_new=route_name == RESERVED_RECIPE_NAME,
        limits=FIELD_LIMITS,
    )

# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    recipes = get_store().tiles()
    return render_template('index.html', recipes=recipes, new_name=RESERVED_RECIPE_NAME)

# ============================================
# ROUTES - EDITOR
# ============================================

@app.route('/recipes/<path:name>', methods=['GET', 'POST'])
def recipe_editor(name):
    store = get_store()

    if request.method == 'GET':
        if name == RESERVED_RECIPE_NAME:
            return render_editor(store.default_recipe(), name)
        try:
            draft = store.load(name)
        except RecipeNotFoundError as e:
            flash(str(e), 'warning')
            return redirect(url_for('index'))
        return render_editor(draft, name)

    editor = DoughEditor(store, recipe_from_form(request.form, store.defaults))
    # A changed flour weight re-snaps an untouched egg count
    if previous_flour_weight(request.form) != editor.draft.flour_weight:
        editor.draft = set_flour_weight(editor.draft, editor.draft.flour_weight)
    action, _, target = request.form.get('action', 'calculate').partition(':')

    try:
        if action == 'save':
            saved = editor.save()
            flash(f'Recipe "{saved.name}" saved!', 'success')
            return redirect(url_for('recipe_editor', name=saved.name))
        if action == 'save_as_new':
            saved = editor.save_as_new()
            flash(f'Recipe saved as "{saved.name}"!', 'success')
            return redirect(url_for('recipe_editor', name=saved.name))
        if action == 'reset':
            editor.reset()
            flash('Recipe form has been reset to default values.', 'info')
            return redirect(url_for('recipe_editor', name=RESERVED_RECIPE_NAME))
    except RecipeValidationError as e:
        flash(str(e), 'danger')
        return render_editor(editor.draft, name)

    editor.draft = apply_draft_action(editor.draft, action, target)
    return render_editor(editor.draft, name)


@app.route('/print/<path:name>')
def recipe_print(name):
    store = get_store()
    if name == RESERVED_RECIPE_NAME:
        recipe = store.default_recipe()
    else:
        try:
            recipe = store.load(name)
        except RecipeNotFoundError as e:
            flash(str(e), 'warning')
            return redirect(url_for('index'))
    return render_template('print.html', export=export_recipe(recipe))

# ============================================
# ROUTES - RECIPE MANAGEMENT
# ============================================

@app.route('/manage/delete', methods=['POST'])
def recipe_delete():
    name = request.form.get('name', '')
    current = request.form.get('current', '')
    try:
        deleted = get_store().delete(name)
    except RecipeValidationError as e:
        flash(str(e), 'danger')
        return redirect(url_for('index'))

    flash(f'Recipe "{deleted.name}" deleted!', 'success')
    # Deleting the recipe open in the editor leaves the editor on defaults
    if current and current == deleted.name:
        return redirect(url_for('recipe_editor', name=RESERVED_RECIPE_NAME))
    return redirect(url_for('index'))


@app.route('/manage/rename', methods=['POST'])
def recipe_rename():
    name = request.form.get('name', '')
    try:
        renamed = get_store().rename(name, request.form.get('new_name', ''))
    except RecipeValidationError as e:
        flash(str(e), 'danger')
        return redirect(url_for('index'))
    flash(f'Recipe "{name}" renamed to "{renamed.name}"!', 'success')
    return redirect(url_for('index'))


@app.route('/manage/duplicate', methods=['POST'])
def recipe_duplicate():
    try:
        duplicate = get_store().duplicate(request.form.get('name', ''))
    except RecipeValidationError as e:
        flash(str(e), 'danger')
        return redirect(url_for('index'))
    flash(f'Recipe duplicated as "{duplicate.name}"!', 'success')
    return redirect(url_for('index'))


@app.route('/manage/pin', methods=['POST'])
def recipe_pin():
    try:
        get_store().toggle_pin(request.form.get('name', ''))
    except RecipeValidationError as e:
        flash(str(e), 'danger')
    return redirect(url_for('index'))

# ============================================
# ROUTES - JSON API
# ============================================

@app.route('/api/recipes')
def api_recipes():
    return jsonify([r.to_dict() for r in get_store().tiles()])


@app.route('/api/recipes', methods=['POST'])
def api_recipe_save():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object.'}), 400
    payload = data.get('recipe', data)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Recipe must be a JSON object.'}), 400
    store = get_store()
    draft = recipe_from_json(payload, store.defaults)
    try:
        if data.get('mode') == 'save_as_new':
            saved = store.save_as_new(draft)
        else:
            saved = store.save(draft)
    except RecipeValidationError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(saved.to_dict()), 201


@app.route('/api/recipes/<path:name>')
def api_recipe(name):
    try:
        recipe = get_store().load(name)
    except RecipeNotFoundError as e:
        return jsonify({'error': str(e)}), 404
    return jsonify({'recipe': recipe.to_dict(), 'calculation': calculate_dough(recipe).to_dict()})


@app.route('/api/export/<path:name>')
def api_export(name):
    try:
        recipe = get_store().load(name)
    except RecipeNotFoundError as e:
        return jsonify({'error': str(e)}), 404
    return jsonify(export_recipe(recipe))


@app.route('/api/calculate', methods=['POST'])
def api_calculate():
    recipe = recipe_from_json(request.get_json(silent=True))
    return jsonify(calculate_dough(recipe).to_dict())


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()
        logger.info('Database ready at %s', app.config['SQLALCHEMY_DATABASE_URI'])


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
