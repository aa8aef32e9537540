def create(client, **overrides):
    payload = {
        'name': 'Ann',
        'email': 'ann@x.com',
        'subject': 'Hi',
        'message': 'Hello there',
    }
    payload.update(overrides)
    return client.post('/api/contacts', json=payload)


def test_create_contact(client):
    response = create(client)
    assert response.status_code == 201
    data = response.get_json()
    assert data['success'] is True
    assert data['message'] == 'Contact created successfully'
    assert data['contactId']


def test_create_contact_missing_field(client):
    response = create(client, email='')
    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'message': 'All fields are required'}


def test_create_contact_without_body(client):
    response = client.post('/api/contacts', data='not json')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'All fields are required'


def test_create_contact_duplicate(client):
    create(client)
    response = create(client)
    assert response.status_code == 400
    assert response.get_json()['success'] is False
    listing = client.get('/api/contacts').get_json()
    assert len(listing['contacts']) == 1


def test_list_contacts(client):
    create(client)
    create(client, name='Bob', email='bob@mail.org')
    response = client.get('/api/contacts')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert [c['name'] for c in data['contacts']] == ['Bob', 'Ann']


def test_update_status(client):
    contact_id = create(client).get_json()['contactId']
    response = client.patch(f'/api/contacts/{contact_id}/status', json={'status': 'read'})
    assert response.status_code == 200
    assert response.get_json() == {
        'success': True, 'message': 'Contact status updated successfully'
    }
    [contact] = client.get('/api/contacts').get_json()['contacts']
    assert contact['status'] == 'read'
    assert contact['updatedAt'] > contact['createdAt']


def test_update_status_invalid(client):
    contact_id = create(client).get_json()['contactId']
    response = client.patch(f'/api/contacts/{contact_id}/status', json={'status': 'done'})
    assert response.status_code == 400
    assert response.get_json()['message'].startswith('Invalid status')


def test_update_status_not_found(client):
    response = client.put('/api/contacts/missing/status', json={'status': 'read'})
    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'Contact not found'}


def test_api_store_unavailable(unreachable_app):
    client = unreachable_app.test_client()
    response = client.post('/api/contacts', json={
        'name': 'Ann', 'email': 'ann@x.com', 'subject': 'Hi', 'message': 'Hello',
    })
    assert response.status_code == 503
    assert response.get_json() == {'success': False, 'message': 'Service unavailable'}

    response = client.get('/api/contacts')
    assert response.status_code == 500
    assert response.get_json()['message'] == 'Failed to get contacts'


def test_api_unknown_route(client):
    response = client.get('/api/nothing')
    assert response.status_code == 404
    assert response.get_json()['success'] is False
