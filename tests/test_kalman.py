import numpy as np

from rgbdtrack.kalman import KalmanFilter


def test_predict_from_rest_keeps_position():
    kf = KalmanFilter(3, 4, 5, 6, 0.15)
    state = kf.predict()
    assert np.allclose(state, [3, 4, 0, 0, 5, 6])


def test_predict_copies_into_posterior():
    kf = KalmanFilter(3, 4, 5, 6, 0.15)
    state = kf.predict()
    assert np.allclose(kf.state_post, state)
    assert np.allclose(kf.error_cov_post, kf.error_cov_pre)


def test_correct_moves_between_prediction_and_measurement():
    kf = KalmanFilter(100, 50, 20, 40, 0.15)
    kf.predict()
    state = kf.correct(110, 50, 20, 40)
    assert 100 < state[0] < 110
    assert np.isclose(state[1], 50)
    assert np.isclose(state[4], 20)
    assert np.isclose(state[5], 40)


def test_measurement_equal_to_state_leaves_state():
    kf = KalmanFilter(10, 20, 30, 40, 0.15)
    kf.predict()
    state = kf.correct(10, 20, 30, 40)
    assert np.allclose(state, [10, 20, 0, 0, 30, 40])


def test_correct_shrinks_measured_variances():
    kf = KalmanFilter(0, 0, 10, 10, 0.15)
    kf.predict()
    kf.correct(1, 1, 10, 10)
    pre = np.diag(kf.error_cov_pre)
    post = np.diag(kf.error_cov_post)
    for index in (0, 1, 4, 5):
        assert post[index] < pre[index]


def test_velocity_follows_steady_motion():
    kf = KalmanFilter(0, 0, 10, 10, 0.15)
    for step in range(1, 15):
        kf.predict()
        state = kf.correct(5 * step, 0, 10, 10)
    assert state[2] > 0
    assert abs(state[3]) < 1e-9


def test_covariance_stays_symmetric():
    kf = KalmanFilter(0, 0, 10, 10, 0.15)
    for step in range(6):
        kf.predict()
        kf.correct(step, 2 * step, 10, 12)
    assert np.allclose(kf.error_cov_post, kf.error_cov_post.T)


def test_predict_returns_independent_copy():
    kf = KalmanFilter(1, 2, 3, 4, 0.15)
    state = kf.predict()
    state[0] = 999
    assert kf.state_pre[0] == 1