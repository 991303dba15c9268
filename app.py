from flask import Flask, render_template, request, redirect, url_for, flash, abort, jsonify
import json
import logging

from config import get_config
from constants import RECIPE_TAGS, VALID_VISIBILITIES, VISIBILITY_PRIVATE, VISIBILITY_PUBLIC
from constants import MAX_INGREDIENTS, MAX_INSTRUCTIONS, MAX_LENGTHS, MAX_MINUTES
from models import db, Recipe
from services import (
    ExtractionError, format_servings, is_placeholder, parse_extraction_content,
    recipe_from_extraction, scale_for_servings, step_servings
)
from utils.sanitizer import (
    sanitize_text, sanitize_recipe_name, sanitize_lines, sanitize_tags, sanitize_url
)

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(level=app.config['LOG_LEVEL'])

db.init_app(app)

# Register Jinja filter for servings display (4.0 -> 4, 2.5 -> 2.5)
app.jinja_env.filters['servings'] = format_servings


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value else default
        if result != result:  # NaN
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError, OverflowError):
        return default


def safe_int(value, default=0, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def scaled_view(recipe):
    """
    Work out the ingredient list and servings controls for a recipe page.

    The desired servings come from ?servings= exactly as typed; a missing
    value means the recipe's own servings, compared as stored so the
    original lines are shown untouched.
    """
    shown = request.args.get('servings')
    if shown is None:
        desired = recipe.servings
        shown = format_servings(recipe.servings)
    else:
        desired = shown

    ingredients = scale_for_servings(recipe.ingredients or [], recipe.servings, desired)
    step = app.config['SERVINGS_STEP']
    minimum = app.config['MIN_SERVINGS']
    maximum = app.config['MAX_SERVINGS']

    return {
        'desired_servings': shown,
        'ingredients': ingredients,
        'scalable': not any(is_placeholder(i) for i in ingredients),
        'fewer_servings': format_servings(
            step_servings(desired, recipe.servings, -step, minimum, maximum)),
        'more_servings': format_servings(
            step_servings(desired, recipe.servings, step, minimum, maximum)),
    }


def recipe_from_form(form):
    """Read the add/edit recipe form into Recipe constructor kwargs."""
    visibility = form.get('visibility', VISIBILITY_PUBLIC)
    if visibility not in VALID_VISIBILITIES:
        visibility = VISIBILITY_PUBLIC

    # Checked common tags plus any typed in as "a, b, c"
    tags = form.getlist('tags') + form.get('custom_tags', '').split(',')

    return {
        'title': sanitize_recipe_name(form.get('title', '')),
        'description': sanitize_text(form.get('description', ''),
                                     max_length=MAX_LENGTHS['description']),
        'link': sanitize_url(form.get('link', '')),
        'cook_time': safe_int(form.get('cook_time'), default=0, min_val=0, max_val=MAX_MINUTES),
        'prep_time': safe_int(form.get('prep_time'), default=0, min_val=0, max_val=MAX_MINUTES),
        'servings': safe_float(form.get('servings'), default=app.config['DEFAULT_SERVINGS'],
                               min_val=app.config['MIN_SERVINGS'],
                               max_val=app.config['MAX_SERVINGS']),
        'tags': sanitize_tags(tags),
        'ingredients': sanitize_lines(form.get('ingredients', ''), MAX_INGREDIENTS),
        'instructions': sanitize_lines(form.get('instructions', ''), MAX_INSTRUCTIONS,
                                       max_length=MAX_LENGTHS['instruction_text']),
        'visibility': visibility,
    }


def form_from_recipe(recipe):
    """Prefill values for the edit form, in the shape recipe_from_form reads."""
    tags = recipe.tags or []
    return {
        'title': recipe.title,
        'description': recipe.description or '',
        'link': recipe.link or '',
        'cook_time': recipe.cook_time or 0,
        'prep_time': recipe.prep_time or 0,
        'servings': format_servings(recipe.servings),
        'custom_tags': ', '.join(t for t in tags if t not in RECIPE_TAGS),
        'ingredients': '\n'.join(recipe.ingredients or []),
        'instructions': '\n'.join(recipe.instructions or []),
        'visibility': recipe.visibility or VISIBILITY_PUBLIC,
    }


def tag_filter(tag):
    """SQL condition matching recipes whose JSON tag list holds tag (any case)."""
    # Tags are stored as a JSON array, so look for the quoted tag in its text
    needle = json.dumps(tag.lower())
    needle = needle.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    tags_text = db.func.lower(db.cast(Recipe.tags, db.Text))
    return tags_text.like(f'%{needle}%', escape='\\')

# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    tag = request.args.get('tag', '').strip()
    query = Recipe.query
    if tag:
        query = query.filter(tag_filter(tag))
    recipes = query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()
    return render_template('index.html', recipes=recipes, tags=RECIPE_TAGS, selected_tag=tag)

# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/recipe/<int:id>')
def recipe_view(id):
    recipe = db.get_or_404(Recipe, id)
    return render_template('recipe_view.html', recipe=recipe,
                           view_endpoint='recipe_view', **scaled_view(recipe))

@app.route('/recipe/add', methods=['GET', 'POST'])
def recipe_add():
    if request.method == 'POST':
        if not request.form.get('title', '').strip():
            flash('Recipe title is required', 'danger')
            return render_template('recipe_form.html', tags=RECIPE_TAGS, form=request.form,
                                   selected_tags=request.form.getlist('tags'))

        recipe = Recipe(**recipe_from_form(request.form))
        db.session.add(recipe)
        db.session.commit()
        app.logger.info("Added recipe %d (%s)", recipe.id, recipe.title)
        flash(f'Recipe "{recipe.title}" added!', 'success')
        return redirect(url_for('recipe_view', id=recipe.id))

    return render_template('recipe_form.html', tags=RECIPE_TAGS, form={}, selected_tags=[])

@app.route('/recipe/<int:id>/edit', methods=['GET', 'POST'])
def recipe_edit(id):
    recipe = db.get_or_404(Recipe, id)

    if request.method == 'POST':
        if not request.form.get('title', '').strip():
            flash('Recipe title is required', 'danger')
            return render_template('recipe_form.html', recipe=recipe, tags=RECIPE_TAGS,
                                   form=request.form, selected_tags=request.form.getlist('tags'))

        for field, value in recipe_from_form(request.form).items():
            setattr(recipe, field, value)
        db.session.commit()
        app.logger.info("Updated recipe %d (%s)", recipe.id, recipe.title)
        flash(f'Recipe "{recipe.title}" updated!', 'success')
        return redirect(url_for('recipe_view', id=recipe.id))

    return render_template('recipe_form.html', recipe=recipe, tags=RECIPE_TAGS,
                           form=form_from_recipe(recipe), selected_tags=recipe.tags or [])

@app.route('/recipe/<int:id>/delete', methods=['POST'])
def recipe_delete(id):
    recipe = db.get_or_404(Recipe, id)
    title = recipe.title
    db.session.delete(recipe)
    db.session.commit()
    app.logger.info("Deleted recipe %d (%s)", id, title)
    flash(f'Recipe "{title}" deleted', 'success')
    return redirect(url_for('index'))

@app.route('/recipe/<int:id>/visibility', methods=['POST'])
def recipe_visibility(id):
    recipe = db.get_or_404(Recipe, id)
    recipe.visibility = VISIBILITY_PRIVATE if recipe.is_public else VISIBILITY_PUBLIC
    db.session.commit()
    flash(f'Recipe is now {recipe.visibility}', 'success')
    return redirect(url_for('recipe_view', id=recipe.id))

# ============================================
# ROUTES - SHARING
# ============================================

@app.route('/share/<int:id>')
def share_view(id):
    recipe = db.get_or_404(Recipe, id)
    if not recipe.is_public:
        abort(404)
    return render_template('recipe_view.html', recipe=recipe, shared=True,
                           view_endpoint='share_view', **scaled_view(recipe))

# ============================================
# ROUTES - API
# ============================================

@app.route('/api/recipe/<int:id>/scale')
def api_recipe_scale(id):
    recipe = db.get_or_404(Recipe, id)
    view = scaled_view(recipe)
    return jsonify({
        'servings': view['desired_servings'],
        'ingredients': view['ingredients'],
        'scalable': view['scalable'],
    })

@app.route('/api/recipe/import', methods=['POST'])
def api_recipe_import():
    """Save a recipe returned by the extraction service.

    Accepts either the extracted recipe object itself or {"content": "..."}
    holding the model's raw reply.
    """
    payload = request.get_json(silent=True)
    try:
        if isinstance(payload, dict) and isinstance(payload.get('content'), str):
            payload = parse_extraction_content(payload['content'])
        fields = recipe_from_extraction(payload)
    except ExtractionError as e:
        app.logger.warning("Rejected recipe import: %s", e)
        return jsonify({'error': str(e)}), 400

    recipe = Recipe(**fields)
    db.session.add(recipe)
    db.session.commit()
    app.logger.info("Imported recipe %d (%s)", recipe.id, recipe.title)
    return jsonify(recipe.to_dict()), 201

# ============================================
# DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
